"""
Transfer Mapping Tests

Immutable X transfer => Etherscan-style transaction, and the nonce heuristic.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from imx_offchain.transactions import (
    ZERO_ADDRESS,
    TokenType,
    TransactionView,
    TransferRecord,
    timestamp_ms,
    timestamp_to_nonce,
    to_transaction,
)


class TestTimestampToNonce:
    """The last three digits of the millisecond timestamp become the nonce"""

    def test_trailing_digits(self):
        assert timestamp_to_nonce(1670000123456) == "456"

    def test_values_above_900_are_shifted(self):
        assert timestamp_to_nonce(1670000123950) == "850"
        assert timestamp_to_nonce(1670000123901) == "801"

    def test_900_is_not_shifted(self):
        assert timestamp_to_nonce(1670000123900) == "900"

    @pytest.mark.parametrize("timestamp", [None, 0, ""])
    def test_missing_timestamp(self, timestamp):
        assert timestamp_to_nonce(timestamp) == "0"

    def test_leading_zeros_dropped(self):
        assert timestamp_to_nonce(1670000123007) == "7"

    def test_string_timestamp(self):
        assert timestamp_to_nonce("1670000123456") == "456"

    def test_short_timestamp(self):
        """Test that fewer than three digits give nonce 0"""
        assert timestamp_to_nonce(42) == "0"

    def test_collisions_are_possible(self):
        """Test that transfers a second apart share a nonce"""
        assert timestamp_to_nonce(1670000123456) == timestamp_to_nonce(1670000124456)


class TestTimestampMs:
    def test_aware_datetime(self):
        value = datetime(2022, 12, 2, 16, 55, 23, 456000, tzinfo=timezone.utc)

        assert timestamp_ms(value) == 1670000123456

    def test_naive_datetime_is_utc(self):
        assert timestamp_ms(datetime(2022, 12, 2, 16, 55, 23, 456000)) == 1670000123456

    def test_other_timezone(self):
        value = datetime(2022, 12, 2, 17, 55, 23, 456999, tzinfo=timezone(timedelta(hours=1)))

        assert timestamp_ms(value) == 1670000123456


class TestTransferRecord:
    def test_parse_api_json(self, eth_transfer):
        record = TransferRecord.model_validate(eth_transfer)

        assert record.token.type == TokenType.ETH
        assert record.token.data.quantity == 10**18
        assert record.transaction_id == 4207345
        assert record.timestamp.tzinfo is not None


class TestToTransaction:
    """Tests for to_transaction"""

    def test_eth_transfer(self, eth_transfer):
        """Test every field of a mapped ETH transfer"""
        view = to_transaction(TransferRecord.model_validate(eth_transfer))

        assert view.model_dump(by_alias=True) == {
            "timeStamp": 1670000123,
            "hash": "4207345",
            "nonce": "456",
            "blockHash": "",
            "transactionIndex": 0,
            "from": eth_transfer["user"],
            "to": eth_transfer["receiver"],
            "value": "1000000000000000000",
            "txreceipt_status": "success",
            "contractAddress": ZERO_ADDRESS,
            "confirmations": 0,
        }

    def test_eth_ignores_token_address(self, eth_transfer):
        """Test that ETH transfers always use the zero address"""
        assert eth_transfer["token"]["data"]["token_address"]

        view = to_transaction(TransferRecord.model_validate(eth_transfer))

        assert view.contract_address == "0x0000000000000000000000000000000000000000"

    def test_erc20_uses_token_address(self, erc20_transfer):
        view = to_transaction(TransferRecord.model_validate(erc20_transfer))

        assert view.contract_address == "0xccc8cb5229b0ac8069c51fd58367fd1e622afd97"
        assert view.nonce == "850"

    def test_value_keeps_full_precision(self, erc20_transfer):
        """Test that quantities beyond float precision are rendered exactly"""
        view = to_transaction(TransferRecord.model_validate(erc20_transfer))

        assert view.value == "123456789012345678901234567890"
        assert float(view.value) > 2**53

    def test_integer_quantity(self, eth_transfer):
        eth_transfer["token"]["data"]["quantity"] = 2**64 + 1

        view = to_transaction(TransferRecord.model_validate(eth_transfer))

        assert view.value == "18446744073709551617"

    def test_missing_token_address(self, erc20_transfer):
        del erc20_transfer["token"]["data"]["token_address"]

        view = to_transaction(TransferRecord.model_validate(erc20_transfer))

        assert view.contract_address == ""

    def test_string_transaction_id(self, eth_transfer):
        eth_transfer["transaction_id"] = "0xabc"

        assert to_transaction(TransferRecord.model_validate(eth_transfer)).hash == "0xabc"

    def test_timestamp_floor(self, eth_transfer):
        eth_transfer["timestamp"] = "2022-12-02T16:55:23.999Z"

        view = to_transaction(TransferRecord.model_validate(eth_transfer))

        assert view.time_stamp == 1670000123
        assert view.nonce == "899"

    def test_view_is_read_only(self, eth_transfer):
        view = to_transaction(TransferRecord.model_validate(eth_transfer))

        assert isinstance(view, TransactionView)
        with pytest.raises(ValidationError):
            view.nonce = "1"

    def test_unlisted_token_type_uses_token_address(self, erc20_transfer):
        """Test that a token type outside TokenType maps like any non-ETH token"""
        erc20_transfer["token"] = {"type": "ERC1155", "data": {"token_address": "0xabc", "quantity": "1"}}

        view = to_transaction(TransferRecord.model_validate(erc20_transfer))

        assert view.contract_address == "0xabc"
        assert view.value == "1"
