import pytest

from evm_approvals.cli.view import View
from evm_approvals.managers import ApprovalExecutor, BatchOrchestrator
from evm_approvals.tests.fakes import FakeChain


@pytest.fixture
def chain():
    return FakeChain()


@pytest.fixture
def view():
    return View(verbose=True)


@pytest.fixture
def executor(chain, view):
    return ApprovalExecutor(chain, view)


@pytest.fixture
def orchestrator(executor, view):
    return BatchOrchestrator(executor, view)
