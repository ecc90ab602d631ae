from gooberbot.errors import (
    MISSING_ACCESS,
    CustomData,
    LogChannelError,
    UserError,
    contextualize_log_channel_error,
)


def test_missing_access_becomes_user_error():
    original = LogChannelError("Missing Access", code=MISSING_ACCESS)
    result = contextualize_log_channel_error(original)
    assert isinstance(result, UserError)
    assert "unable to access the log channel (may be missing permission)" in str(result)
    assert result.__cause__ is original


def test_missing_permissions_becomes_user_error():
    original = LogChannelError("denied", required_permissions="SEND_MESSAGES")
    result = contextualize_log_channel_error(original)
    assert isinstance(result, UserError)
    assert "missing required log channel permission(s): SEND_MESSAGES" in str(result)


def test_other_errors_are_internal():
    original = ConnectionError("boom")
    result = contextualize_log_channel_error(original)
    assert not isinstance(result, UserError)
    assert str(result).startswith("failed to send message in log channel")
    assert result.__cause__ is original


def test_other_http_code_is_internal():
    original = LogChannelError("nope", code=MISSING_ACCESS + 1)
    result = contextualize_log_channel_error(original)
    assert not isinstance(result, UserError)
    assert str(result).startswith("failed to send message in log channel")
    assert result.__cause__ is original


def test_custom_data_default():
    assert CustomData().early_access is False
    assert CustomData(early_access=True).early_access is True