class AppStatusCode:
    """Internal status codes returned in the `status_code` field of every JSON body."""

    OPERATION_FAILED = "200"
    OPERATION_ERROR = "201"
    INVALID_INPUT = "202"
    DUPLICATE_ADD_ERROR = "204"
    NOT_FOUND = "205"

    AUTHENTICATION_CREDENTIALS_INVALID = "300"
    AUTHENTICATION_TOKEN_INVALID = "301"
    AUTHENTICATION_TOKEN_EXPIRED = "302"
    AUTHENTICATION_USER_INVALID = "303"
    AUTHENTICATION_USER_OTP_EXPIRED = "304"
    AUTHENTICATION_USER_OTP_INVALID = "305"
    AUTHENTICATION_ORIGIN_FORBIDDEN = "307"

    UNAUTHORIZED_ACTION = "400"
    USER_EMAIL_IS_UNIQUE = "401"
    USER_DOCUMENT_IS_UNIQUE = "402"
