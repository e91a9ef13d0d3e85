from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    BRANCH_ADMIN = "branch_admin"
    CUSTOMER = "customer"
    DELIVERY = "delivery"


class UserGender(str, Enum):
    MALE = "m"
    FEMALE = "f"


class OTPType(str, Enum):
    PASSWORD = "password-recovery"
    EMAIL = "email-validation"
