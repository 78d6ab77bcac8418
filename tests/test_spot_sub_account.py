from __future__ import annotations

from decimal import Decimal
from urllib.parse import parse_qsl, urlsplit

import pytest

from conftest import API_KEY
from spot.enums import (
    FuturesTransferType,
    FuturesType,
    MarginTransferType,
    UniversalTransferAccountType,
)
from spot.sub_account import SubAccount

AMOUNT = Decimal("522.23")

CASES = [
    (lambda s: s.create_a_virtual_subaccount("addsdd"), "POST", "/sapi/v1/sub-account/virtualSubAccount"),
    (lambda s: s.query_subaccount_list(), "GET", "/sapi/v1/sub-account/list"),
    (lambda s: s.query_subaccount_spot_asset_transfer_history(), "GET", "/sapi/v1/sub-account/sub/transfer/history"),
    (
        lambda s: s.query_subaccount_futures_asset_transfer_history("aaa@test.com", FuturesType.USDT_MARGINED_FUTURES),
        "GET",
        "/sapi/v1/sub-account/futures/internalTransfer",
    ),
    (
        lambda s: s.subaccount_futures_asset_transfer(
            "aaa@test.com", "bbb@test.com", FuturesType.USDT_MARGINED_FUTURES, "BNB", Decimal("2.187")
        ),
        "POST",
        "/sapi/v1/sub-account/futures/internalTransfer",
    ),
    (lambda s: s.query_subaccount_assets("testsub@gmail.com"), "GET", "/sapi/v3/sub-account/assets"),
    (lambda s: s.query_subaccount_spot_assets_summary(), "GET", "/sapi/v1/sub-account/spotSummary"),
    (lambda s: s.get_subaccount_deposit_address("testsub@gmail.com", "USDT"), "GET", "/sapi/v1/capital/deposit/subAddress"),
    (lambda s: s.get_subaccount_deposit_history("testsub@gmail.com"), "GET", "/sapi/v1/capital/deposit/subHisrec"),
    (lambda s: s.get_subaccounts_status_on_margin_futures(), "GET", "/sapi/v1/sub-account/status"),
    (lambda s: s.enable_margin_for_subaccount("123@test.com"), "POST", "/sapi/v1/sub-account/margin/enable"),
    (lambda s: s.get_detail_on_subaccounts_margin_account("123@test.com"), "GET", "/sapi/v1/sub-account/margin/account"),
    (lambda s: s.get_summary_of_subaccounts_margin_account(), "GET", "/sapi/v1/sub-account/margin/accountSummary"),
    (lambda s: s.enable_futures_for_subaccount("123@test.com"), "POST", "/sapi/v1/sub-account/futures/enable"),
    (lambda s: s.get_detail_on_subaccounts_futures_account("123@test.com"), "GET", "/sapi/v1/sub-account/futures/account"),
    (lambda s: s.get_summary_of_subaccounts_futures_account(), "GET", "/sapi/v1/sub-account/futures/accountSummary"),
    (lambda s: s.get_futures_positionrisk_of_subaccount("123@test.com"), "GET", "/sapi/v1/sub-account/futures/positionRisk"),
    (
        lambda s: s.futures_transfer_for_subaccount(
            "123@test.com", "USDT", AMOUNT, FuturesTransferType.SPOT_TO_USDT_MARGINED_FUTURES
        ),
        "POST",
        "/sapi/v1/sub-account/futures/transfer",
    ),
    (
        lambda s: s.margin_transfer_for_subaccount("123@test.com", "USDT", AMOUNT, MarginTransferType.SPOT_TO_MARGIN),
        "POST",
        "/sapi/v1/sub-account/margin/transfer",
    ),
    (lambda s: s.transfer_to_subaccount_of_same_master("123@test.com", "USDT", AMOUNT), "POST", "/sapi/v1/sub-account/transfer/subToSub"),
    (lambda s: s.transfer_to_master("USDT", AMOUNT), "POST", "/sapi/v1/sub-account/transfer/subToMaster"),
    (lambda s: s.subaccount_transfer_history(), "GET", "/sapi/v1/sub-account/transfer/subUserHistory"),
    (
        lambda s: s.universal_transfer(
            UniversalTransferAccountType.SPOT, UniversalTransferAccountType.USDT_FUTURE, "USDT", AMOUNT
        ),
        "POST",
        "/sapi/v1/sub-account/universalTransfer",
    ),
    (lambda s: s.query_universal_transfer_history(), "GET", "/sapi/v1/sub-account/universalTransfer"),
    (
        lambda s: s.get_detail_on_subaccounts_futures_account_v2("abc@test.com", FuturesType.USDT_MARGINED_FUTURES),
        "GET",
        "/sapi/v2/sub-account/futures/account",
    ),
    (
        lambda s: s.get_summary_of_subaccounts_futures_account_v2(FuturesType.USDT_MARGINED_FUTURES),
        "GET",
        "/sapi/v2/sub-account/futures/accountSummary",
    ),
    (
        lambda s: s.get_futures_positionrisk_of_subaccount_v2("abc@test.com", FuturesType.USDT_MARGINED_FUTURES),
        "GET",
        "/sapi/v2/sub-account/futures/positionRisk",
    ),
    (lambda s: s.enable_leverage_token_for_subaccount("123@test.com", True), "POST", "/sapi/v1/sub-account/blvt/enable"),
    (
        lambda s: s.deposit_assets_into_the_managed_subaccount("aaa@test.com", "USDT", AMOUNT),
        "POST",
        "/sapi/v1/managed-subaccount/deposit",
    ),
    (lambda s: s.query_managed_subaccount_asset_details("123@test.com"), "GET", "/sapi/v1/managed-subaccount/asset"),
    (
        lambda s: s.withdraw_assets_from_the_managed_subaccount("aaa@test.com", "USDT", AMOUNT),
        "POST",
        "/sapi/v1/managed-subaccount/withdraw",
    ),
]


@pytest.mark.parametrize("call, method, path", CASES)
def test_sub_account_endpoints(dispatcher, transport, call, method, path):
    transport.body = '{"tranId":66157362489}'

    result = call(SubAccount(dispatcher))

    parts = urlsplit(transport.last["url"])
    keys = [k for k, _ in parse_qsl(parts.query)]
    assert result == '{"tranId":66157362489}'
    assert transport.last["method"] == method
    assert parts.path == path
    assert keys[-2:] == ["timestamp", "signature"]
    assert transport.last["headers"] == {"X-MBX-APIKEY": API_KEY}


def test_universal_transfer_parameter_order(dispatcher, transport):
    SubAccount(dispatcher).universal_transfer(
        UniversalTransferAccountType.SPOT,
        UniversalTransferAccountType.COIN_FUTURE,
        "BTC",
        Decimal("0.1"),
        to_email="subaccount1@test.com",
    )

    pairs = parse_qsl(urlsplit(transport.last["url"]).query)
    assert pairs[:5] == [
        ("toEmail", "subaccount1@test.com"),
        ("fromAccountType", "SPOT"),
        ("toAccountType", "COIN_FUTURE"),
        ("asset", "BTC"),
        ("amount", "0.1"),
    ]


def test_email_is_sent_readable(dispatcher, transport):
    SubAccount(dispatcher).enable_leverage_token_for_subaccount("123@test.com", False)

    assert "email=123@test.com&enableBlvt=false&timestamp=" in transport.last["url"]


def test_futures_type_enum_is_sent_as_number(dispatcher, transport):
    SubAccount(dispatcher).get_summary_of_subaccounts_futures_account_v2(
        FuturesType.COIN_MARGINED_FUTURES, page=1
    )

    pairs = parse_qsl(urlsplit(transport.last["url"]).query)
    assert pairs[:2] == [("futuresType", "2"), ("page", "1")]
