"""Sub-account and managed sub-account endpoints.

Every endpoint here is ``SIGNED`` and must be called with the master
account's credentials, except :meth:`SubAccount.transfer_to_master`,
:meth:`SubAccount.transfer_to_subaccount_of_same_master` and
:meth:`SubAccount.subaccount_transfer_history`, which are called by the
sub-account itself.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from core.dispatcher import ApiRequestDispatcher
from core.models import ParameterSet, Security
from spot.enums import (
    FuturesTransferType,
    FuturesType,
    MarginTransferType,
    SubUserTransferType,
    UniversalTransferAccountType,
)

CREATE_A_VIRTUAL_SUBACCOUNT = "/sapi/v1/sub-account/virtualSubAccount"
QUERY_SUBACCOUNT_LIST = "/sapi/v1/sub-account/list"
QUERY_SUBACCOUNT_SPOT_ASSET_TRANSFER_HISTORY = "/sapi/v1/sub-account/sub/transfer/history"
SUBACCOUNT_FUTURES_INTERNAL_TRANSFER = "/sapi/v1/sub-account/futures/internalTransfer"
QUERY_SUBACCOUNT_ASSETS = "/sapi/v3/sub-account/assets"
QUERY_SUBACCOUNT_SPOT_ASSETS_SUMMARY = "/sapi/v1/sub-account/spotSummary"
GET_SUBACCOUNT_DEPOSIT_ADDRESS = "/sapi/v1/capital/deposit/subAddress"
GET_SUBACCOUNT_DEPOSIT_HISTORY = "/sapi/v1/capital/deposit/subHisrec"
GET_SUBACCOUNTS_STATUS_ON_MARGIN_FUTURES = "/sapi/v1/sub-account/status"
ENABLE_MARGIN_FOR_SUBACCOUNT = "/sapi/v1/sub-account/margin/enable"
GET_DETAIL_ON_SUBACCOUNTS_MARGIN_ACCOUNT = "/sapi/v1/sub-account/margin/account"
GET_SUMMARY_OF_SUBACCOUNTS_MARGIN_ACCOUNT = "/sapi/v1/sub-account/margin/accountSummary"
ENABLE_FUTURES_FOR_SUBACCOUNT = "/sapi/v1/sub-account/futures/enable"
GET_DETAIL_ON_SUBACCOUNTS_FUTURES_ACCOUNT = "/sapi/v1/sub-account/futures/account"
GET_SUMMARY_OF_SUBACCOUNTS_FUTURES_ACCOUNT = "/sapi/v1/sub-account/futures/accountSummary"
GET_FUTURES_POSITIONRISK_OF_SUBACCOUNT = "/sapi/v1/sub-account/futures/positionRisk"
FUTURES_TRANSFER_FOR_SUBACCOUNT = "/sapi/v1/sub-account/futures/transfer"
MARGIN_TRANSFER_FOR_SUBACCOUNT = "/sapi/v1/sub-account/margin/transfer"
TRANSFER_TO_SUBACCOUNT_OF_SAME_MASTER = "/sapi/v1/sub-account/transfer/subToSub"
TRANSFER_TO_MASTER = "/sapi/v1/sub-account/transfer/subToMaster"
SUBACCOUNT_TRANSFER_HISTORY = "/sapi/v1/sub-account/transfer/subUserHistory"
UNIVERSAL_TRANSFER = "/sapi/v1/sub-account/universalTransfer"
GET_DETAIL_ON_SUBACCOUNTS_FUTURES_ACCOUNT_V2 = "/sapi/v2/sub-account/futures/account"
GET_SUMMARY_OF_SUBACCOUNTS_FUTURES_ACCOUNT_V2 = "/sapi/v2/sub-account/futures/accountSummary"
GET_FUTURES_POSITIONRISK_OF_SUBACCOUNT_V2 = "/sapi/v2/sub-account/futures/positionRisk"
ENABLE_LEVERAGE_TOKEN_FOR_SUBACCOUNT = "/sapi/v1/sub-account/blvt/enable"
DEPOSIT_ASSETS_INTO_THE_MANAGED_SUBACCOUNT = "/sapi/v1/managed-subaccount/deposit"
QUERY_MANAGED_SUBACCOUNT_ASSET_DETAILS = "/sapi/v1/managed-subaccount/asset"
WITHDRAW_ASSETS_FROM_THE_MANAGED_SUBACCOUNT = "/sapi/v1/managed-subaccount/withdraw"

Amount = Decimal | float


class SubAccount:
    def __init__(self, dispatcher: ApiRequestDispatcher) -> None:
        self._dispatcher = dispatcher

    def _signed(self, path: str, method: str, params: ParameterSet) -> str:
        return self._dispatcher.dispatch(
            path, method, params, security=Security.SIGNED
        ).body

    # ------------------------------------------------------------------
    # Accounts
    def create_a_virtual_subaccount(
        self, sub_account_string: str, recv_window: int | None = None
    ) -> str:
        """Create a virtual sub-account; Binance appends a random suffix to the e-mail."""
        return self._signed(
            CREATE_A_VIRTUAL_SUBACCOUNT,
            "POST",
            {"subAccountString": sub_account_string, "recvWindow": recv_window},
        )

    def query_subaccount_list(
        self,
        email: str | None = None,
        is_freeze: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            QUERY_SUBACCOUNT_LIST,
            "GET",
            {
                "email": email,
                "isFreeze": is_freeze,
                "page": page,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def get_subaccounts_status_on_margin_futures(
        self, email: str | None = None, recv_window: int | None = None
    ) -> str:
        return self._signed(
            GET_SUBACCOUNTS_STATUS_ON_MARGIN_FUTURES,
            "GET",
            {"email": email, "recvWindow": recv_window},
        )

    def enable_margin_for_subaccount(self, email: str, recv_window: int | None = None) -> str:
        return self._signed(
            ENABLE_MARGIN_FOR_SUBACCOUNT, "POST", {"email": email, "recvWindow": recv_window}
        )

    def enable_futures_for_subaccount(self, email: str, recv_window: int | None = None) -> str:
        return self._signed(
            ENABLE_FUTURES_FOR_SUBACCOUNT, "POST", {"email": email, "recvWindow": recv_window}
        )

    def enable_leverage_token_for_subaccount(
        self, email: str, enable_blvt: bool, recv_window: int | None = None
    ) -> str:
        return self._signed(
            ENABLE_LEVERAGE_TOKEN_FOR_SUBACCOUNT,
            "POST",
            {"email": email, "enableBlvt": enable_blvt, "recvWindow": recv_window},
        )

    # ------------------------------------------------------------------
    # Assets
    def query_subaccount_assets(self, email: str, recv_window: int | None = None) -> str:
        return self._signed(
            QUERY_SUBACCOUNT_ASSETS, "GET", {"email": email, "recvWindow": recv_window}
        )

    def query_subaccount_spot_assets_summary(
        self,
        email: str | None = None,
        page: int | None = None,
        size: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        """BTC valued spot asset summary. ``size`` default 10, max 20."""
        return self._signed(
            QUERY_SUBACCOUNT_SPOT_ASSETS_SUMMARY,
            "GET",
            {"email": email, "page": page, "size": size, "recvWindow": recv_window},
        )

    def get_subaccount_deposit_address(
        self,
        email: str,
        coin: str,
        network: str | None = None,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            GET_SUBACCOUNT_DEPOSIT_ADDRESS,
            "GET",
            {"email": email, "coin": coin, "network": network, "recvWindow": recv_window},
        )

    def get_subaccount_deposit_history(
        self,
        email: str,
        coin: str | None = None,
        status: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        offset: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        """``status``: 0 pending, 6 credited but cannot withdraw, 1 success."""
        return self._signed(
            GET_SUBACCOUNT_DEPOSIT_HISTORY,
            "GET",
            {
                "email": email,
                "coin": coin,
                "status": status,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "offset": offset,
                "recvWindow": recv_window,
            },
        )

    # ------------------------------------------------------------------
    # Margin
    def get_detail_on_subaccounts_margin_account(
        self, email: str, recv_window: int | None = None
    ) -> str:
        return self._signed(
            GET_DETAIL_ON_SUBACCOUNTS_MARGIN_ACCOUNT,
            "GET",
            {"email": email, "recvWindow": recv_window},
        )

    def get_summary_of_subaccounts_margin_account(self, recv_window: int | None = None) -> str:
        return self._signed(
            GET_SUMMARY_OF_SUBACCOUNTS_MARGIN_ACCOUNT, "GET", {"recvWindow": recv_window}
        )

    def margin_transfer_for_subaccount(
        self,
        email: str,
        asset: str,
        amount: Amount,
        type: MarginTransferType,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            MARGIN_TRANSFER_FOR_SUBACCOUNT,
            "POST",
            {
                "email": email,
                "asset": asset,
                "amount": amount,
                "type": type,
                "recvWindow": recv_window,
            },
        )

    # ------------------------------------------------------------------
    # Futures
    def get_detail_on_subaccounts_futures_account(
        self, email: str, recv_window: int | None = None
    ) -> str:
        return self._signed(
            GET_DETAIL_ON_SUBACCOUNTS_FUTURES_ACCOUNT,
            "GET",
            {"email": email, "recvWindow": recv_window},
        )

    def get_summary_of_subaccounts_futures_account(self, recv_window: int | None = None) -> str:
        return self._signed(
            GET_SUMMARY_OF_SUBACCOUNTS_FUTURES_ACCOUNT, "GET", {"recvWindow": recv_window}
        )

    def get_futures_positionrisk_of_subaccount(
        self, email: str, recv_window: int | None = None
    ) -> str:
        return self._signed(
            GET_FUTURES_POSITIONRISK_OF_SUBACCOUNT,
            "GET",
            {"email": email, "recvWindow": recv_window},
        )

    def get_detail_on_subaccounts_futures_account_v2(
        self, email: str, futures_type: FuturesType, recv_window: int | None = None
    ) -> str:
        return self._signed(
            GET_DETAIL_ON_SUBACCOUNTS_FUTURES_ACCOUNT_V2,
            "GET",
            {"email": email, "futuresType": futures_type, "recvWindow": recv_window},
        )

    def get_summary_of_subaccounts_futures_account_v2(
        self,
        futures_type: FuturesType,
        page: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            GET_SUMMARY_OF_SUBACCOUNTS_FUTURES_ACCOUNT_V2,
            "GET",
            {
                "futuresType": futures_type,
                "page": page,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def get_futures_positionrisk_of_subaccount_v2(
        self, email: str, futures_type: FuturesType, recv_window: int | None = None
    ) -> str:
        return self._signed(
            GET_FUTURES_POSITIONRISK_OF_SUBACCOUNT_V2,
            "GET",
            {"email": email, "futuresType": futures_type, "recvWindow": recv_window},
        )

    def futures_transfer_for_subaccount(
        self,
        email: str,
        asset: str,
        amount: Amount,
        type: FuturesTransferType,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            FUTURES_TRANSFER_FOR_SUBACCOUNT,
            "POST",
            {
                "email": email,
                "asset": asset,
                "amount": amount,
                "type": type,
                "recvWindow": recv_window,
            },
        )

    def query_subaccount_futures_asset_transfer_history(
        self,
        email: str,
        futures_type: FuturesType,
        start_time: int | None = None,
        end_time: int | None = None,
        page: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            SUBACCOUNT_FUTURES_INTERNAL_TRANSFER,
            "GET",
            {
                "email": email,
                "futuresType": futures_type,
                "startTime": start_time,
                "endTime": end_time,
                "page": page,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def subaccount_futures_asset_transfer(
        self,
        from_email: str,
        to_email: str,
        futures_type: FuturesType,
        asset: str,
        amount: Amount,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            SUBACCOUNT_FUTURES_INTERNAL_TRANSFER,
            "POST",
            {
                "fromEmail": from_email,
                "toEmail": to_email,
                "futuresType": futures_type,
                "asset": asset,
                "amount": amount,
                "recvWindow": recv_window,
            },
        )

    # ------------------------------------------------------------------
    # Transfers
    def query_subaccount_spot_asset_transfer_history(
        self,
        from_email: str | None = None,
        to_email: str | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        page: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            QUERY_SUBACCOUNT_SPOT_ASSET_TRANSFER_HISTORY,
            "GET",
            {
                "fromEmail": from_email,
                "toEmail": to_email,
                "startTime": start_time,
                "endTime": end_time,
                "page": page,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def transfer_to_subaccount_of_same_master(
        self, to_email: str, asset: str, amount: Amount, recv_window: int | None = None
    ) -> str:
        return self._signed(
            TRANSFER_TO_SUBACCOUNT_OF_SAME_MASTER,
            "POST",
            {"toEmail": to_email, "asset": asset, "amount": amount, "recvWindow": recv_window},
        )

    def transfer_to_master(
        self, asset: str, amount: Amount, recv_window: int | None = None
    ) -> str:
        return self._signed(
            TRANSFER_TO_MASTER,
            "POST",
            {"asset": asset, "amount": amount, "recvWindow": recv_window},
        )

    def subaccount_transfer_history(
        self,
        asset: str | None = None,
        type: SubUserTransferType | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        """Without ``start_time``/``end_time`` only the last 30 days are returned."""
        return self._signed(
            SUBACCOUNT_TRANSFER_HISTORY,
            "GET",
            {
                "asset": asset,
                "type": type,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def universal_transfer(
        self,
        from_account_type: UniversalTransferAccountType,
        to_account_type: UniversalTransferAccountType,
        asset: str,
        amount: Amount,
        from_email: str | None = None,
        to_email: str | None = None,
        recv_window: int | None = None,
    ) -> str:
        """Transfer between master and sub-accounts across account types.

        Omitting an e-mail means the master account on that side.
        """
        return self._signed(
            UNIVERSAL_TRANSFER,
            "POST",
            {
                "fromEmail": from_email,
                "toEmail": to_email,
                "fromAccountType": from_account_type,
                "toAccountType": to_account_type,
                "asset": asset,
                "amount": amount,
                "recvWindow": recv_window,
            },
        )

    def query_universal_transfer_history(
        self,
        from_email: str | None = None,
        to_email: str | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        page: int | None = None,
        limit: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        return self._signed(
            UNIVERSAL_TRANSFER,
            "GET",
            {
                "fromEmail": from_email,
                "toEmail": to_email,
                "startTime": start_time,
                "endTime": end_time,
                "page": page,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    # ------------------------------------------------------------------
    # Managed sub-accounts
    def deposit_assets_into_the_managed_subaccount(
        self, to_email: str, asset: str, amount: Amount, recv_window: int | None = None
    ) -> str:
        return self._signed(
            DEPOSIT_ASSETS_INTO_THE_MANAGED_SUBACCOUNT,
            "POST",
            {"toEmail": to_email, "asset": asset, "amount": amount, "recvWindow": recv_window},
        )

    def query_managed_subaccount_asset_details(
        self, email: str, recv_window: int | None = None
    ) -> str:
        return self._signed(
            QUERY_MANAGED_SUBACCOUNT_ASSET_DETAILS,
            "GET",
            {"email": email, "recvWindow": recv_window},
        )

    def withdraw_assets_from_the_managed_subaccount(
        self,
        from_email: str,
        asset: str,
        amount: Amount,
        transfer_date: int | None = None,
        recv_window: int | None = None,
    ) -> str:
        """``transfer_date`` schedules the withdrawal (ms); defaults to now."""
        params: dict[str, Any] = {
            "fromEmail": from_email,
            "asset": asset,
            "amount": amount,
            "transferDate": transfer_date,
            "recvWindow": recv_window,
        }
        return self._signed(WITHDRAW_ASSETS_FROM_THE_MANAGED_SUBACCOUNT, "POST", params)
