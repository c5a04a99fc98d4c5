"""ResponseCode -- Slack webhook 返回的纯文本响应码"""

from roboslack.api.enums import CaseInsensitiveStrEnum


class ResponseCode(CaseInsensitiveStrEnum):
    """webhook 响应体对应的响应码，解析忽略大小写"""

    OK = "ok"
    CHANNEL_NOT_FOUND = "channel_not_found"
    NOT_IN_CHANNEL = "not_in_channel"
    IS_ARCHIVED = "is_archived"
    MSG_TOO_LONG = "msg_too_long"
    NO_TEXT = "no_text"
    TOO_MANY_ATTACHMENTS = "too_many_attachments"
    RATE_LIMITED = "rate_limited"
    NOT_AUTHED = "not_authed"
    INVALID_AUTH = "invalid_auth"
    ACCOUNT_INACTIVE = "account_inactive"
    INVALID_ARG_NAME = "invalid_arg_name"
    INVALID_ARRAY_ARG = "invalid_array_arg"
    INVALID_CHARSET = "invalid_charset"
    INVALID_FORM_DATA = "invalid_form_data"
    INVALID_POST_TYPE = "invalid_post_type"
    MISSING_POST_TYPE = "missing_post_type"
    REQUEST_TIMEOUT = "request_timeout"
    MISSING_CHARSET = "missing_charset"
    SUPERFLUOUS_CHARSET = "superfluous_charset"
    # incoming webhook 专有
    INVALID_TOKEN = "invalid_token"
    NO_SERVICE = "no_service"
    NO_SERVICE_ID = "no_service_id"
    NO_TEAM = "no_team"
    TEAM_DISABLED = "team_disabled"
    CHANNEL_IS_ARCHIVED = "channel_is_archived"
    ACTION_PROHIBITED = "action_prohibited"
    POSTING_TO_GENERAL_CHANNEL_DENIED = "posting_to_general_channel_denied"
    USER_NOT_FOUND = "user_not_found"
    INVALID_PAYLOAD = "invalid_payload"
    NO_ACTIVE_HOOKS = "no_active_hooks"

    @property
    def is_ok(self) -> bool:
        return self is ResponseCode.OK
