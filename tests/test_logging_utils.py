from core.logging_utils import mask_key, redact_signature


def test_mask_key():
    assert mask_key(None) == ""
    assert mask_key("abc") == "a***c"
    assert mask_key("abcdefghij") == "abc***hij"


def test_redact_signature_in_url():
    url = "https://api.binance.com/api/v3/account?timestamp=1&signature=" + "a" * 64

    assert redact_signature(url) == (
        "https://api.binance.com/api/v3/account?timestamp=1&signature=<hidden len=64>"
    )


def test_redact_signature_without_signature():
    assert redact_signature("symbol=BTCUSDT") == "symbol=BTCUSDT"
    assert redact_signature("") == ""


def test_redact_signature_inside_log_line_keeps_the_rest():
    line = "GET /api/v3/account?signature=abcd | X-MBX-APIKEY=abc***xyz"

    redacted = redact_signature(line)

    assert redacted == (
        "GET /api/v3/account?signature=<hidden len=4> | X-MBX-APIKEY=abc***xyz"
    )
    assert redact_signature(redacted) == redacted
