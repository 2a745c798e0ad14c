from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from hexbytes import HexBytes
from web3.exceptions import TimeExhausted

from evm_approvals.config import MAX_UINT256
from evm_approvals.core import ChainClient, TransactionHandle
from evm_approvals.exceptions import ChainQueryError, ConfirmationError, SubmissionError
from evm_approvals.models import WalletHandle
from evm_approvals.tests.fakes import TOKEN_X, SPENDER_S

OWNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
TX_HASH = HexBytes("0x" + "ab" * 32)


@pytest.fixture
def w3():
    mock = MagicMock()
    mock.to_checksum_address.side_effect = lambda address: address
    return mock


@pytest.fixture
def client(w3):
    return ChainClient(w3, confirmation_timeout=30)


@pytest.fixture
def contract(w3):
    return w3.eth.contract.return_value


@pytest.fixture
def signer():
    account = MagicMock()
    account.sign_transaction.return_value = SimpleNamespace(raw_transaction=b"\x02signed")
    return WalletHandle(address=OWNER, account=account)


def test_read_contract_value_calls_view_function(client, contract):
    contract.functions.allowance.return_value.call.return_value = 12345

    value = client.read_contract_value(TOKEN_X, "allowance", [OWNER, SPENDER_S])

    assert value == 12345
    contract.functions.allowance.assert_called_once_with(OWNER, SPENDER_S)


def test_read_failure_is_chain_query_error(client, contract):
    contract.functions.symbol.return_value.call.side_effect = ValueError("Could not decode contract function call")

    with pytest.raises(ChainQueryError, match="Could not decode") as excinfo:
        client.read_contract_value(TOKEN_X, "symbol", [])
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_submit_signs_locally_with_pending_nonce(client, w3, contract, signer):
    w3.eth.get_transaction_count.return_value = 7
    contract.functions.approve.return_value.build_transaction.return_value = {"gas": 46000, "nonce": 7}
    w3.eth.send_raw_transaction.return_value = TX_HASH

    handle = client.submit_transaction(TOKEN_X, "approve", [SPENDER_S, MAX_UINT256], signer)

    assert handle == TransactionHandle(tx_hash="0x" + "ab" * 32, sender=OWNER, nonce=7)
    w3.eth.get_transaction_count.assert_called_once_with(OWNER, "pending")
    contract.functions.approve.assert_called_once_with(SPENDER_S, MAX_UINT256)
    contract.functions.approve.return_value.build_transaction.assert_called_once_with({"from": OWNER, "nonce": 7})
    signer.account.sign_transaction.assert_called_once_with({"gas": 46000, "nonce": 7})
    w3.eth.send_raw_transaction.assert_called_once_with(b"\x02signed")


def test_broadcast_failure_is_submission_error(client, w3, signer):
    w3.eth.get_transaction_count.return_value = 0
    w3.eth.send_raw_transaction.side_effect = ValueError("insufficient funds for gas * price + value")

    with pytest.raises(SubmissionError) as excinfo:
        client.submit_transaction(TOKEN_X, "approve", [SPENDER_S, MAX_UINT256], signer)
    assert str(excinfo.value) == "insufficient funds for gas * price + value"


def test_signing_failure_is_submission_error(client, w3, signer):
    w3.eth.get_transaction_count.return_value = 0
    signer.account.sign_transaction.side_effect = TypeError("invalid transaction field")

    with pytest.raises(SubmissionError, match="invalid transaction field"):
        client.submit_transaction(TOKEN_X, "approve", [SPENDER_S, MAX_UINT256], signer)
    w3.eth.send_raw_transaction.assert_not_called()


def test_await_confirmation_returns_status_and_block(client, w3):
    w3.eth.wait_for_transaction_receipt.return_value = {"status": 1, "blockNumber": 42}
    handle = TransactionHandle(tx_hash="0x01", sender=OWNER, nonce=0)

    result = client.await_confirmation(handle)

    assert result.success
    assert result.block_number == 42
    w3.eth.wait_for_transaction_receipt.assert_called_once_with("0x01", timeout=30)


def test_reverted_receipt_is_not_success(client, w3):
    w3.eth.wait_for_transaction_receipt.return_value = {"status": 0, "blockNumber": 43}

    result = client.await_confirmation(TransactionHandle(tx_hash="0x02", sender=OWNER, nonce=1))

    assert not result.success


def test_wait_timeout_is_confirmation_error(client, w3):
    w3.eth.wait_for_transaction_receipt.side_effect = TimeExhausted("not in the chain after 30 seconds")

    with pytest.raises(ConfirmationError, match="not in the chain") as excinfo:
        client.await_confirmation(TransactionHandle(tx_hash="0x03", sender=OWNER, nonce=2))
    assert excinfo.value.tx_hash == "0x03"


def test_balance_failure_is_chain_query_error(client, w3):
    w3.eth.get_balance.side_effect = ConnectionError("connection refused")
    with pytest.raises(ChainQueryError, match="connection refused"):
        client.get_balance(OWNER)
