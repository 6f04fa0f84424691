"""Wire enumerations of the Ads API.

Member values are the exact tokens the API sends and accepts. They
usually match the member names, with the exception of
:class:`TargetingCriterionGender` whose wire tokens are numeric.
"""

from enum import Enum


class ApprovalStatus(str, Enum):
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    UNDER_REVIEW = "UNDER_REVIEW"


class AdvertisingPermission(str, Enum):
    ACCOUNT_ADMIN = "ACCOUNT_ADMIN"
    AD_MANAGER = "AD_MANAGER"
    TWEET_COMPOSER = "TWEET_COMPOSER"
    ANALYST = "ANALYST"


class AdvertisingProductType(str, Enum):
    PROMOTED_ACCOUNT = "PROMOTED_ACCOUNT"
    PROMOTED_TWEETS = "PROMOTED_TWEETS"


class AdvertisingObjective(str, Enum):
    APP_ENGAGEMENTS = "APP_ENGAGEMENTS"
    APP_INSTALLS = "APP_INSTALLS"
    CUSTOM = "CUSTOM"
    FOLLOWERS = "FOLLOWERS"
    LEAD_GENERATION = "LEAD_GENERATION"
    TWEET_ENGAGEMENTS = "TWEET_ENGAGEMENTS"
    VIDEO_VIEWS = "VIDEO_VIEWS"
    WEBSITE_CLICKS = "WEBSITE_CLICKS"
    WEBSITE_CONVERSIONS = "WEBSITE_CONVERSIONS"


class AdvertisingSentiment(str, Enum):
    ALL = "ALL"
    POSITIVE_ONLY = "POSITIVE_ONLY"


class LineItemOptimization(str, Enum):
    DEFAULT = "DEFAULT"
    WEBSITE_CONVERSIONS = "WEBSITE_CONVERSIONS"


class BidUnit(str, Enum):
    APP_CLICK = "APP_CLICK"
    APP_INSTALL = "APP_INSTALL"
    ENGAGEMENT = "ENGAGEMENT"
    FOLLOW = "FOLLOW"
    LEAD = "LEAD"
    LINK_CLICK = "LINK_CLICK"
    VIEW = "VIEW"


class AdvertisingPlacement(str, Enum):
    ALL_ON_TWITTER = "ALL_ON_TWITTER"
    PUBLISHER_NETWORK = "PUBLISHER_NETWORK"
    TWITTER_PROFILE = "TWITTER_PROFILE"
    TWITTER_SEARCH = "TWITTER_SEARCH"
    TWITTER_TIMELINE = "TWITTER_TIMELINE"


class ReasonNotServable(str, Enum):
    ACCOUNT_REJECTED = "ACCOUNT_REJECTED"
    ACCOUNT_UNDER_REVIEW = "ACCOUNT_UNDER_REVIEW"
    AWAITING_APPROVAL_BY_ADVERTISER = "AWAITING_APPROVAL_BY_ADVERTISER"
    BUDGET_EXHAUSTED = "BUDGET_EXHAUSTED"
    CONTENT_REVIEW_PROBLEM = "CONTENT_REVIEW_PROBLEM"
    DELETED = "DELETED"
    EXPIRED = "EXPIRED"
    FUNDING_PROBLEM = "FUNDING_PROBLEM"
    INCOMPLETE = "INCOMPLETE"
    PAUSED_BY_ADVERTISER = "PAUSED_BY_ADVERTISER"
    STARTS_IN_FUTURE = "STARTS_IN_FUTURE"


class FundingInstrumentType(str, Enum):
    AGENCY_CREDIT_LINE = "AGENCY_CREDIT_LINE"
    CREDIT_CARD = "CREDIT_CARD"
    CREDIT_LINE = "CREDIT_LINE"
    INSERTION_ORDER = "INSERTION_ORDER"


class PromotableUserType(str, Enum):
    FULL = "FULL"
    RETWEETS_ONLY = "RETWEETS_ONLY"


class FeatureKey(str, Enum):
    AGE_TARGETING = "AGE_TARGETING"
    ALL_IN_ONE_APP_INSTALLS_CARDS = "ALL_IN_ONE_APP_INSTALLS_CARDS"
    CPI_CHARGING = "CPI_CHARGING"
    EVENT_TARGETING = "EVENT_TARGETING"
    INSTALLED_APP_CATEGORY_TARGETING = "INSTALLED_APP_CATEGORY_TARGETING"
    MOBILE_CONVERSIONS = "MOBILE_CONVERSIONS"
    PROMOTED_VIDEO = "PROMOTED_VIDEO"
    TV_TARGETING = "TV_TARGETING"
    VALIDATED_AGE_TARGETING = "VALIDATED_AGE_TARGETING"


class TailoredAudienceListType(str, Enum):
    DEVICE_ID = "DEVICE_ID"
    EMAIL = "EMAIL"
    HANDLE = "HANDLE"
    PHONE_NUMBER = "PHONE_NUMBER"
    TWITTER_ID = "TWITTER_ID"


class TailoredAudienceType(str, Enum):
    CRM = "CRM"
    FLEXIBLE = "FLEXIBLE"
    MOBILE = "MOBILE"
    WEB = "WEB"


class TailoredAudienceChangeOperation(str, Enum):
    ADD = "ADD"
    REMOVE = "REMOVE"
    REPLACE = "REPLACE"


class TailoredAudienceChangeState(str, Enum):
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    PROCESSING = "PROCESSING"


class TargetingCriterionType(str, Enum):
    AGE = "AGE"
    FOLLOWERS_OF_USER = "FOLLOWERS_OF_USER"
    SIMILAR_TO_FOLLOWERS_OF_USER = "SIMILAR_TO_FOLLOWERS_OF_USER"
    INTEREST = "INTEREST"
    LOCATION = "LOCATION"
    LANGUAGE = "LANGUAGE"
    PLATFORM = "PLATFORM"
    PLATFORM_VERSION = "PLATFORM_VERSION"
    DEVICE = "DEVICE"
    WIFI_ONLY = "WIFI_ONLY"
    GENDER = "GENDER"
    TV_CHANNEL = "TV_CHANNEL"
    TV_GENRE = "TV_GENRE"
    TV_SHOW = "TV_SHOW"
    TV_SHOW_AIRING_RESTRICTED = "TV_SHOW_AIRING_RESTRICTED"
    NETWORK_OPERATOR = "NETWORK_OPERATOR"
    NETWORK_ACTIVATION_DURATION_LT = "NETWORK_ACTIVATION_DURATION_LT"
    NETWORK_ACTIVATION_DURATION_GTE = "NETWORK_ACTIVATION_DURATION_GTE"
    BROAD_KEYWORD = "BROAD_KEYWORD"
    UNORDERED_KEYWORD = "UNORDERED_KEYWORD"
    PHRASE_KEYWORD = "PHRASE_KEYWORD"
    EXACT_KEYWORD = "EXACT_KEYWORD"
    NEGATIVE_PHRASE_KEYWORD = "NEGATIVE_PHRASE_KEYWORD"
    NEGATIVE_UNORDERED_KEYWORD = "NEGATIVE_UNORDERED_KEYWORD"
    NEGATIVE_EXACT_KEYWORD = "NEGATIVE_EXACT_KEYWORD"
    TAILORED_AUDIENCE = "TAILORED_AUDIENCE"
    BEHAVIOR = "BEHAVIOR"
    NEGATIVE_BEHAVIOR = "NEGATIVE_BEHAVIOR"
    BEHAVIOR_EXPANDED = "BEHAVIOR_EXPANDED"
    APP_STORE_CATEGORY = "APP_STORE_CATEGORY"
    APP_STORE_CATEGORY_LOOKALIKE = "APP_STORE_CATEGORY_LOOKALIKE"
    EXCLUDE_APP_LIST = "EXCLUDE_APP_LIST"


class TargetingCriterionGender(Enum):
    """Gender targeting; ``BOTH`` has no wire token and is never sent."""

    BOTH = None
    MALE = "1"
    FEMALE = "2"


class TargetingCriterionAgeBucket(str, Enum):
    AGE_13_TO_24 = "AGE_13_TO_24"
    AGE_13_TO_34 = "AGE_13_TO_34"
    AGE_13_TO_49 = "AGE_13_TO_49"
    AGE_13_TO_54 = "AGE_13_TO_54"
    AGE_OVER_13 = "AGE_OVER_13"
    AGE_18_TO_34 = "AGE_18_TO_34"
    AGE_18_TO_49 = "AGE_18_TO_49"
    AGE_18_TO_54 = "AGE_18_TO_54"
    AGE_OVER_18 = "AGE_OVER_18"
    AGE_21_TO_34 = "AGE_21_TO_34"
    AGE_21_TO_49 = "AGE_21_TO_49"
    AGE_21_TO_54 = "AGE_21_TO_54"
    AGE_OVER_21 = "AGE_OVER_21"
    AGE_25_TO_49 = "AGE_25_TO_49"
    AGE_25_TO_54 = "AGE_25_TO_54"
    AGE_OVER_25 = "AGE_OVER_25"
    AGE_35_TO_49 = "AGE_35_TO_49"
    AGE_35_TO_54 = "AGE_35_TO_54"
    AGE_OVER_35 = "AGE_OVER_35"
    AGE_OVER_50 = "AGE_OVER_50"


class RetargetingEngagementType(str, Enum):
    ENGAGEMENT = "ENGAGEMENT"
    IMPRESSION = "IMPRESSION"


class AppStore(str, Enum):
    GOOGLE_PLAY = "GOOGLE_PLAY"
    IOS_APP_STORE = "IOS_APP_STORE"


class LocationType(str, Enum):
    CITY = "CITY"
    COUNTRY = "COUNTRY"
    POSTAL_CODE = "POSTAL_CODE"
    REGION = "REGION"


class EventType(str, Enum):
    CONFERENCE = "CONFERENCE"
    HOLIDAY = "HOLIDAY"
    MUSIC_AND_ENTERTAINMENT = "MUSIC_AND_ENTERTAINMENT"
    OTHER = "OTHER"
    POLITICS = "POLITICS"
    RECURRING = "RECURRING"
    SPORTS = "SPORTS"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PromotedUserReferenceSorting(str, Enum):
    ID = "id"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class StatisticsGranularity(str, Enum):
    HOUR = "HOUR"
    DAY = "DAY"
    TOTAL = "TOTAL"


class StatisticsSegmentationType(str, Enum):
    """Statistics segmentation dimension.

    Some dimensions only make sense within one country or one platform;
    :attr:`country_required` and :attr:`platform_required` report which.
    """

    APP_STORE_CATEGORY = "APP_STORE_CATEGORY"
    CITIES = "CITIES"
    CONVERSION_TAGS = "CONVERSION_TAGS"
    DEVICES = "DEVICES"
    GENDER = "GENDER"
    INTERESTS = "INTERESTS"
    KEYWORDS = "KEYWORDS"
    LANGUAGE = "LANGUAGE"
    LOCATIONS = "LOCATIONS"
    PLATFORMS = "PLATFORMS"
    PLATFORM_VERSIONS = "PLATFORM_VERSIONS"
    POSTAL_CODES = "POSTAL_CODES"
    REGIONS = "REGIONS"

    @property
    def country_required(self) -> bool:
        return self in _COUNTRY_SCOPED

    @property
    def platform_required(self) -> bool:
        return self in _PLATFORM_SCOPED


_COUNTRY_SCOPED = frozenset(
    {
        StatisticsSegmentationType.CITIES,
        StatisticsSegmentationType.POSTAL_CODES,
        StatisticsSegmentationType.REGIONS,
    }
)
_PLATFORM_SCOPED = frozenset(
    {
        StatisticsSegmentationType.DEVICES,
        StatisticsSegmentationType.PLATFORM_VERSIONS,
    }
)


class StatisticsMetricFamily(str, Enum):
    CONVERSION = "CONVERSION"
    ENGAGEMENT = "ENGAGEMENT"
    MAP = "MAP"
    VIDEO = "VIDEO"
    OTHER = "OTHER"
    SPEND = "SPEND"
    TPN = "TPN"


class MetricShape(str, Enum):
    SCALAR = "SCALAR"
    BREAKDOWN = "BREAKDOWN"
