"""Strip tracking query parameters from URLs."""

from .clean.tracking_params import (
    AFFILIATE_PARAMS,
    ALL_KNOWN_PARAMS,
    ANALYTICS_PARAMS,
    CATEGORY_PARAMS,
    EMAIL_MARKETING_PARAMS,
    GENERAL_PARAMS,
    SOCIAL_MEDIA_PARAMS,
    TRACKING_PATTERNS,
    UTM_PARAMS,
    TrackingParameterCategory,
    categories_for,
    is_tracking_parameter,
    matches_tracking_pattern,
)
from .clean.url_cleaner import (
    QueryParameter,
    TrackedURL,
    clean_url,
    clean_urls_in_place,
    contains_tracking_parameters,
    parse_query,
    tracking_parameters,
)

__version__ = "0.1.0"
