"""Architectural boundary tests using pytest-archon.

These tests verify that the lockdown core stays independent of the toolkit:
- Domain layer has no dependencies on application or adapters
- The application core never imports adapters or Qt
- Startup can fail without importing the web adapters
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("seb_kiosk.domain.models*")
        .should_not_import("seb_kiosk.adapters*")
        .should_not_import("seb_kiosk.application*")
        .should_not_import("seb_kiosk.domain.contracts*")
        .should_not_import("seb_kiosk.domain.ports*")
        .should_not_import("PyQt6*")
        .may_import("seb_kiosk.domain.models*")
        .check("seb_kiosk")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("seb_kiosk.domain.contracts*")
        .should_not_import("seb_kiosk.adapters*")
        .should_not_import("seb_kiosk.application*")
        .should_not_import("PyQt6*")
        .may_import("seb_kiosk.domain*")
        .check("seb_kiosk")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("seb_kiosk.domain.ports*")
        .should_not_import("seb_kiosk.adapters*")
        .should_not_import("seb_kiosk.application*")
        .should_not_import("PyQt6*")
        .may_import("seb_kiosk.domain*")
        .check("seb_kiosk")
    )


def test_application_core_does_not_import_adapters_or_toolkit() -> None:
    """The lockdown core is testable without a GUI toolkit."""
    (
        archrule("application core", comment="Application core should not depend on adapters or Qt")
        .match("seb_kiosk.application*")
        .should_not_import("seb_kiosk.adapters*")
        .should_not_import("seb_kiosk.main")
        .should_not_import("PyQt6*")
        .may_import("seb_kiosk.domain*")
        .may_import("seb_kiosk.application*")
        .check("seb_kiosk")
    )


def test_config_adapters_do_not_import_toolkit() -> None:
    """A bad policy file must be rejected before any Qt module is loaded."""
    (
        archrule("config independence", comment="Config loading should not pull in Qt")
        .match("seb_kiosk.adapters.config*")
        .should_not_import("PyQt6*")
        .should_not_import("seb_kiosk.adapters.web*")
        .should_not_import("seb_kiosk.adapters.session*")
        .check("seb_kiosk")
    )


def test_cli_does_not_import_web_adapters() -> None:
    """CLI should not import web adapters so argument errors never start Qt."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("seb_kiosk.cli")
        .should_not_import("seb_kiosk.adapters.web*")
        .should_not_import("PyQt6*")
        .check("seb_kiosk")
    )


def test_adapters_do_not_import_entry_point() -> None:
    """Adapters are wired by main, never the other way round."""
    (
        archrule("adapters independence", comment="Adapters should not depend on the entry point")
        .match("seb_kiosk.adapters*")
        .should_not_import("seb_kiosk.main")
        .should_not_import("seb_kiosk.cli")
        .may_import("seb_kiosk.domain*")
        .may_import("seb_kiosk.application*")
        .may_import("seb_kiosk.adapters*")
        .check("seb_kiosk", only_direct_imports=True)
    )
