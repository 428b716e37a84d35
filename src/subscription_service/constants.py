# Файл: src/subscription_service/constants.py

class ServiceStatus:
    CANCELED = -10
    NOT_ACTIVATED = 0
    SUSPENDED = 5
    CAMERA_ONLY = 7
    PRACTICE_MODE = 10
    ACTIVATED = 20


class ServicePlans:
    BLANK = "SSBCV1"
    CAMERA_ONLY = "SSEDCM1"
    CAMERA_UNLIMITED = "SSEDCMU"
    BASIC_MONITORING = "SSEDBM1"
    BASIC_WITH_CAMERA = "SSEDBC1"
    INTERACTIVE = "SSEDSM2"


# camera-class skus: a monitored service can't be moved onto one of these
CAMERA_PLANS = (ServicePlans.BLANK, ServicePlans.CAMERA_ONLY, ServicePlans.CAMERA_UNLIMITED)

DEFAULT_CAMERA_PLAN = "SSVM1"

COUNTRY_ID = {
    "US": 840,
    "GB": 826,
}

DEFAULT_COUNTRY_ID = COUNTRY_ID["US"]
DEFAULT_CURRENCY_ID = 840

DISPATCHER_FROM_COUNTRY_ID = {
    840: "cops",
    826: "securitas",
}

ONE_MONTH_IN_SECONDS = 2628000

TIMEZONES_TO_STRING = {
    # US
    0: "America/New_York",
    1: "America/Chicago",
    2: "America/Denver",
    3: "America/Los_Angeles",
    4: "America/Puerto_Rico",
    5: "America/Phoenix",
    6: "Pacific/Honolulu",
    7: "America/Anchorage",
    # non-US
    8: "Europe/London",
}

TIMEZONES_FROM_STRING = {name: tz_id for tz_id, name in TIMEZONES_TO_STRING.items()}

CERTIFICATE_URI = "https://simplisafe.com/account2/{uid}/alarm-certificate/{sid}"
