from enum import Enum


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------

class Currency(str, Enum):
    NGN = "NGN"
    GHS = "GHS"
    ZAR = "ZAR"
    USD = "USD"
    KES = "KES"
    XOF = "XOF"
    EGP = "EGP"
    RWF = "RWF"


class Interval(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    BIANNUALLY = "biannually"
    ANNUALLY = "annually"


class Channel(str, Enum):
    CARD = "card"
    BANK = "bank"
    USSD = "ussd"
    QR = "qr"
    MOBILE_MONEY = "mobile_money"
    BANK_TRANSFER = "bank_transfer"


class Bearer(str, Enum):
    ACCOUNT = "account"
    SUBACCOUNT = "subaccount"
    ALL_PROPORTIONAL = "all-proportional"
    ALL = "all"


class TransactionStatus(str, Enum):
    FAILED = "failed"
    SUCCESS = "success"
    ABANDONED = "abandoned"


class SplitType(str, Enum):
    PERCENTAGE = "percentage"
    FLAT = "flat"


class GenericStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class Schedule(str, Enum):
    AUTO = "auto"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    MANUAL = "manual"


class Gateway(str, Enum):
    EMANDATE = "emandate"
    DIGITAL_BANK_MANDATE = "digitalbankmandate"


class BulkChargeStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETE = "complete"


# ---------------------------------------------------------------------------
# Customers, verification and transfers
# ---------------------------------------------------------------------------

class Country(str, Enum):
    NIGERIA = "NG"
    GHANA = "GH"
    SOUTH_AFRICA = "ZA"
    KENYA = "KE"
    COTE_D_IVOIRE = "CI"
    EGYPT = "EG"
    RWANDA = "RW"


class RiskAction(str, Enum):
    DEFAULT = "default"
    WHITELIST = "allow"
    BLACKLIST = "deny"


class Identification(str, Enum):
    BVN = "bvn"
    BANK_ACCOUNT = "bank_account"


class RecipientType(str, Enum):
    NUBAN = "nuban"
    MOBILE_MONEY = "mobile_money"
    BASA = "basa"


class Document(str, Enum):
    IDENTITY_NUMBER = "identityNumber"
    PASSPORT_NUMBER = "passportNumber"
    BUSINESS_REGISTRATION_NUMBER = "businessRegistrationNumber"


class AccountType(str, Enum):
    PERSONAL = "personal"
    BUSINESS = "business"


class BankType(str, Enum):
    GHIPPS = "ghipps"
    MOBILE_MONEY = "mobile_money"


class Reason(str, Enum):
    RESEND_OTP = "resend_otp"
    TRANSFER = "transfer"
    DISABLE_OTP = "disable_otp"


# ---------------------------------------------------------------------------
# Disputes
# ---------------------------------------------------------------------------

class Resolution(str, Enum):
    MERCHANT_ACCEPTED = "merchant-accepted"
    DECLINED = "declined"


class DisputeStatus(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    AWAITING_BANK_FEEDBACK = "awaiting-bank-feedback"
    AWAITING_MERCHANT_FEEDBACK = "awaiting-merchant-feedback"
    ARCHIVED = "archived"


# ---------------------------------------------------------------------------
# Terminals and integration
# ---------------------------------------------------------------------------

class TerminalEvent(str, Enum):
    TRANSACTION = "transaction"
    INVOICE = "invoice"


class TerminalEventAction(str, Enum):
    PROCESS = "process"
    VIEW = "view"
    PRINT = "print"


class Domain(str, Enum):
    LIVE = "live"
    TEST = "test"


class SupportedCountryRelationshipType(str, Enum):
    CURRENCY = "currency"
    INTEGRATION_FEATURE = "integration_feature"
    INTEGRATION_TYPE = "integration_type"
    PAYMENT_METHOD = "payment_method"
