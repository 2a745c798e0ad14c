"""
End-to-end command tests: real wallet derivation, fake chain.
"""

import pytest
from dotenv import load_dotenv

from evm_approvals.cli.router import Router
from evm_approvals.config import MAX_UINT256, Settings
from evm_approvals.contracts import load_contracts, target
from evm_approvals.controllers import resolve_plan
from evm_approvals.core import ApprovalContext
from evm_approvals.exceptions import ConfigurationError
from evm_approvals.tests.fakes import FakeChain

TEST_MNEMONIC = "test test test test test test test test test test test junk"
ACCOUNT_0 = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
ACCOUNT_1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
CONTRACTS = load_contracts({})
OVERRIDE = "0x" + "12" * 20


@pytest.fixture
def context():
    settings = Settings(rpc_url="http://localhost:8545", mnemonics=(TEST_MNEMONIC,), wallets_per_mnemonic=2)
    return ApprovalContext(settings=settings, chain=FakeChain())


def test_approve_runs_full_batch(context, capsys):
    chain = context.chain
    tokens = target("uniswap-v3").tokens
    spender = CONTRACTS.uniswap_v3_position_manager
    chain.set_allowance(ACCOUNT_0, tokens[0], spender, MAX_UINT256)

    exit_code = Router().dispatch(context, ["approve", "--yes"])

    assert exit_code == 0
    assert [(s.sender, s.token) for s in chain.submissions] == [
        (ACCOUNT_0, tokens[1]),
        (ACCOUNT_1, tokens[0]),
        (ACCOUNT_1, tokens[1]),
    ]
    out = capsys.readouterr().out
    assert "Total approvals processed: 4" in out
    assert "Already Approved (Skipped): 1" in out


def test_approve_no_wait_skips_confirmation(context):
    exit_code = Router().dispatch(context, ["approve", "--yes", "--no-wait"])

    assert exit_code == 0
    assert len(context.chain.submissions) == 4
    assert context.chain.waits == []


def test_approve_declined_sends_nothing(context, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    exit_code = Router().dispatch(context, ["approve"])

    assert exit_code == 1
    assert context.chain.submissions == []


def test_check_never_submits(context, capsys):
    spender = CONTRACTS.uniswap_v3_position_manager
    context.chain.set_allowance(ACCOUNT_1, CONTRACTS.usdc, spender, MAX_UINT256)

    exit_code = Router().dispatch(context, ["check"])

    assert exit_code == 0
    assert context.chain.submissions == []
    assert "unlimited" in capsys.readouterr().out


def test_wallets_lists_derived_addresses(context, capsys):
    exit_code = Router().dispatch(context, ["wallets"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert ACCOUNT_0 in out
    assert ACCOUNT_1 in out
    assert "1.000000 ETH" in out


def test_unreachable_node_aborts(context):
    context.chain.connected = False
    assert Router().dispatch(context, ["approve", "--yes"]) == 1
    assert context.chain.submissions == []


def test_invalid_override_address_is_reported(context, capsys):
    exit_code = Router().dispatch(context, ["approve", "--yes", "--spender", "0x1234"])

    assert exit_code == 1
    assert "Invalid spender address" in capsys.readouterr().out


def test_resolve_plan_checksums_overrides():
    tokens, spenders = resolve_plan("uniswap-v3", tokens=[CONTRACTS.weth.lower()])
    assert tokens == (CONTRACTS.weth,)
    assert spenders == (CONTRACTS.uniswap_v3_position_manager,)


def test_unknown_target_lists_valid_names():
    with pytest.raises(ConfigurationError, match="uniswap-v3"):
        resolve_plan("sushiswap")


def test_approve_on_closed_stdin_sends_nothing(context, monkeypatch):
    def closed_stdin(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)

    assert Router().dispatch(context, ["approve"]) == 1
    assert context.chain.submissions == []


def test_env_override_set_after_import_is_used(context, monkeypatch):
    monkeypatch.setenv("UNISWAP_V3_POSITION_MANAGER_ADDRESS", OVERRIDE)

    assert Router().dispatch(context, ["approve", "--yes", "--no-wait"]) == 0
    assert {s.spender for s in context.chain.submissions} == {OVERRIDE}


def test_dotenv_override_reaches_plan(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(f"USDC_ADDRESS={OVERRIDE}\n")
    # record the variable so monkeypatch removes what load_dotenv adds
    monkeypatch.setenv("USDC_ADDRESS", "")
    monkeypatch.delenv("USDC_ADDRESS")

    load_dotenv(env_file)
    tokens, _ = resolve_plan("uniswap-v3")

    assert tokens == (OVERRIDE, CONTRACTS.vult)


def test_empty_override_falls_back_to_mainnet():
    tokens, spenders = resolve_plan("uniswap-v3-swap", env={"WETH_ADDRESS": "", "USDC_ADDRESS": OVERRIDE})
    assert tokens == (OVERRIDE, CONTRACTS.vult, CONTRACTS.weth)
    assert spenders == (CONTRACTS.uniswap_v3_swap_router,)


def test_invalid_env_address_is_configuration_error():
    with pytest.raises(ConfigurationError, match="Invalid token address"):
        resolve_plan("uniswap-v3", env={"VULT_ADDRESS": "not-an-address"})
