"""Known tracking query parameters, grouped by category, plus prefix patterns."""

import re
import string
from enum import Enum
from types import MappingProxyType
from typing import List


class TrackingParameterCategory(str, Enum):
    """Category of a known tracking parameter."""
    UTM = "UTM Parameters"
    SOCIAL_MEDIA = "Social Media"
    EMAIL_MARKETING = "Email Marketing"
    ANALYTICS = "Analytics"
    AFFILIATE = "Affiliate & E-commerce"
    GENERAL = "General Tracking"


# Standard and extended UTM parameters
UTM_PARAMS = frozenset({
    "utm_source", "utm_medium", "utm_campaign", "utm_term", "utm_content",
    "utm_id", "utm_source_platform", "utm_creative_format", "utm_marketing_tactic",
})

SOCIAL_MEDIA_PARAMS = frozenset({
    # Facebook
    "fbclid", "fb_action_ids", "fb_action_types", "fb_source", "fb_ref",
    # Google Ads
    "gclid", "gclsrc", "dclid", "gbraid", "wbraid",
    # Microsoft
    "msclkid", "msclid",
    # Twitter/X
    "twclid", "tw_source", "tw_campaign",
    # LinkedIn
    "li_fat_id", "lipi", "licu",
    # TikTok
    "ttclid", "tt_medium", "tt_content",
    # Instagram
    "igshid", "ig_rid",
    # Pinterest, Snapchat, Reddit
    "epik", "sccid", "rdt_cid",
})

EMAIL_MARKETING_PARAMS = frozenset({
    # Mailchimp
    "mc_cid", "mc_eid",
    # HubSpot
    "_hsenc", "_hsmi", "__hssc", "__hstc", "__hsfp",
    "sg_link_id",  # SendGrid
    "cm_mmc",  # Campaign Monitor
    "vgo_ee",  # ActiveCampaign
    "mkt_tok",  # Marketo
    "cc_cid",  # Constant Contact
    "gr_cid",  # GetResponse
    "aweber",
})

ANALYTICS_PARAMS = frozenset({
    # Adobe / Omniture
    "s_cid", "adobe_mc", "icid",
    # Mixpanel, Amplitude, Segment
    "mp_source", "mp_medium", "mp_campaign",
    "amp_source", "amp_medium", "amp_campaign",
    "seg_source", "seg_medium", "seg_campaign",
    # Matomo/Piwik
    "mtm_source", "mtm_medium", "mtm_campaign",
    "pk_source", "pk_medium", "pk_campaign",
    # Yandex
    "yclid", "_openstat",
    # Google Analytics
    "_ga", "_gid", "_gl",
    # Ad networks and attribution SDKs
    "criteo", "tblci", "obOrigUrl",
    "branch_match_id", "adjust_tracker", "adjust_campaign",
})

AFFILIATE_PARAMS = frozenset({
    # Amazon
    "tag", "ascsubtag", "asc_campaign", "asc_source", "asc_refurl",
    # eBay
    "mkcid", "mkevt", "mkrid", "campid", "toolid",
    # Rakuten
    "ranMID", "ranEAID", "ranSiteID",
    # ShareASale, Impact, CJ, Awin
    "sscid", "ssubtag",
    "irclickid", "irgwc",
    "cjid", "cjdata",
    "awc", "awinmid",
    "skimlinks", "vglink",
    # Apple App Store attribution
    "pt", "ct", "mt",
})

GENERAL_PARAMS = frozenset({
    "ref", "referer", "referrer", "source", "campaign", "medium",
    "wickedid", "vero_id", "trk", "trkid", "_hsenc", "mkt_tok",
    "hmb_campaign", "hmb_medium", "hmb_source",
})

CATEGORY_PARAMS = MappingProxyType({
    TrackingParameterCategory.UTM: UTM_PARAMS,
    TrackingParameterCategory.SOCIAL_MEDIA: SOCIAL_MEDIA_PARAMS,
    TrackingParameterCategory.EMAIL_MARKETING: EMAIL_MARKETING_PARAMS,
    TrackingParameterCategory.ANALYTICS: ANALYTICS_PARAMS,
    TrackingParameterCategory.AFFILIATE: AFFILIATE_PARAMS,
    TrackingParameterCategory.GENERAL: GENERAL_PARAMS,
})

# Lookup keys are lowercase; a few vendors document mixed-case names (ranMID).
ALL_KNOWN_PARAMS = frozenset(
    name.lower() for params in CATEGORY_PARAMS.values() for name in params
)

_CATEGORY_LOOKUP = MappingProxyType({
    category: frozenset(name.lower() for name in params)
    for category, params in CATEGORY_PARAMS.items()
})

# Catch unknown parameters by shape
TRACKING_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE | re.ASCII)
    for pattern in (
        r"^utm_",
        r"^fb_",
        r"^track(ing)?_",
        r"^analytics?_",
        r"^mc_",
        r"^ga_",
        r"^_ga",
        r"^gclid",
        r"^fbclid",
    )
)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(name: str) -> str:
    return name.translate(_ASCII_LOWER)


def matches_tracking_pattern(name: str) -> bool:
    """Check a parameter name against the prefix patterns only."""
    return any(pattern.match(name) for pattern in TRACKING_PATTERNS)


def is_tracking_parameter(name: str) -> bool:
    """
    Check if a query parameter name is a tracking parameter.

    The name is compared case-insensitively (ASCII only) against the known
    parameter set and the prefix patterns. Whitelisting is the caller's job.

    Args:
        name: Decoded query parameter name

    Returns:
        True if the name is a known tracker or matches a tracking pattern
    """
    folded = _fold(name)
    return folded in ALL_KNOWN_PARAMS or matches_tracking_pattern(folded)


def categories_for(name: str) -> List[TrackingParameterCategory]:
    """Return the categories listing this parameter name, in enum order."""
    folded = _fold(name)
    return [
        category
        for category in TrackingParameterCategory
        if folded in _CATEGORY_LOOKUP[category]
    ]
