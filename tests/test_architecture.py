"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters reach the application only through domain ports
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("whoami_service.domain.models*")
        .should_not_import("whoami_service.adapters*")
        .should_not_import("whoami_service.application*")
        .should_not_import("whoami_service.domain.contracts*")
        .should_not_import("whoami_service.domain.ports*")
        .may_import("whoami_service.domain.models*")
        .check("whoami_service")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("whoami_service.domain.ports*")
        .should_not_import("whoami_service.adapters*")
        .should_not_import("whoami_service.application*")
        .may_import("whoami_service.domain*")
        .check("whoami_service")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("whoami_service.application*")
        .should_not_import("whoami_service.adapters*")
        .may_import("whoami_service.domain*")
        .may_import("whoami_service.application*")
        .check("whoami_service")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should receive the inspector through the port, not import it."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("whoami_service.adapters*")
        .should_not_import("whoami_service.application*")
        .may_import("whoami_service.domain*")
        .may_import("whoami_service.adapters*")
        .check("whoami_service", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("whoami_service.domain*")
        .should_not_import("whoami_service.adapters*")
        .should_not_import("whoami_service.application*")
        .may_import("whoami_service.domain*")
        .check("whoami_service", only_direct_imports=True)
    )
