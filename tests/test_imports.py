"""Smoke-test that all public APIs can be imported without error.

Catches stale imports, circular dependencies, and missing deps.
No files or fixtures needed, pure import checks.
"""


def test_import_insurapro():
    import insurapro
    assert insurapro.__version__ == "0.1.0"


def test_import_core():
    from insurapro.core import get_config, get_config_value, get_logger, CRM_PATHS  # noqa: F401


def test_import_customers():
    from insurapro.customers.models import Customer, Interaction, NO_INTERACTION  # noqa: F401
    from insurapro.customers.codec import HEADER, encode_customer, decode_customer  # noqa: F401
    from insurapro.customers.store import CustomerStore  # noqa: F401
    from insurapro.customers.menu import CRMMenu, run_menu  # noqa: F401
    from insurapro.customers.prompts import ConsolePrompt, PromptSource  # noqa: F401


def test_import_cli():
    from insurapro.cli.main import app  # noqa: F401
    from insurapro.customers.cli import app as customers_app  # noqa: F401
