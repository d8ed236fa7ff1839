"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters can depend on domain but not on application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and each other."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("sl_departures.domain.models*")
        .should_not_import("sl_departures.adapters*")
        .should_not_import("sl_departures.application*")
        .should_not_import("sl_departures.domain.contracts*")
        .should_not_import("sl_departures.domain.ports*")
        .may_import("sl_departures.domain.models*")
        .check("sl_departures")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("sl_departures.domain.contracts*")
        .should_not_import("sl_departures.adapters*")
        .should_not_import("sl_departures.application*")
        .may_import("sl_departures.domain*")
        .check("sl_departures")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("sl_departures.domain.ports*")
        .should_not_import("sl_departures.adapters*")
        .should_not_import("sl_departures.application*")
        .may_import("sl_departures.domain*")
        .check("sl_departures")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("sl_departures.application*")
        .should_not_import("sl_departures.adapters*")
        .should_not_import("aiohttp*")
        .may_import("sl_departures.domain*")
        .may_import("sl_departures.application*")
        .check("sl_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services; main wires them together."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("sl_departures.adapters*")
        .should_not_import("sl_departures.application*")
        .may_import("sl_departures.domain*")
        .may_import("sl_departures.adapters*")
        .check("sl_departures", only_direct_imports=True)
    )


def test_domain_has_no_outward_dependencies() -> None:
    """Domain layer should not depend on anything outside the domain."""
    (
        archrule("domain no cycles", comment="Domain layer should not import outer layers")
        .match("sl_departures.domain*")
        .should_not_import("sl_departures.adapters*")
        .should_not_import("sl_departures.application*")
        .should_not_import("sl_departures.main")
        .may_import("sl_departures.domain*")
        .check("sl_departures", only_direct_imports=True)
    )
