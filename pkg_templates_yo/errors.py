"""Framework exceptions and exit-code mapping for pkg-templates-yo."""

from __future__ import annotations


class PkgTemplatesError(Exception):
    """Base exception for all pkg-templates-yo errors."""

    exit_code: int = 1


# ── Configuration errors (fatal at construction time) ───────────────────────


class ConfigurationError(PkgTemplatesError):
    """Raised when a template or plugin is constructed with invalid settings."""

    exit_code: int = 2


class MissingIdentityError(ConfigurationError):
    """Raised when no user name is given and none is found in git config."""

    def __init__(self) -> None:
        super().__init__(
            "No username found: pass user=<name> or set git config github.user"
        )


class UnknownLicenseError(ConfigurationError):
    """Raised when the requested license is not in the license store."""

    def __init__(self, license_id: str) -> None:
        super().__init__(f"License '{license_id}' is not available")
        self.license_id = license_id


class InvalidHostError(ConfigurationError):
    """Raised when a host string has no parseable hostname."""

    def __init__(self, host: str) -> None:
        super().__init__(f"Invalid host '{host}': no hostname component")
        self.host = host


class InvalidVersionError(ConfigurationError):
    """Raised when a version setting cannot be parsed."""

    def __init__(self, field_name: str, value: str) -> None:
        super().__init__(f"Invalid {field_name} '{value}': not a PEP 440 version")
        self.field_name = field_name
        self.value = value


class TemplateNotFoundError(ConfigurationError):
    """Raised when a plugin's source template or asset file does not exist."""

    def __init__(self, path: str, what: str = "File") -> None:
        super().__init__(f"{what} {path} does not exist")
        self.path = path


class InvalidPackageNameError(ConfigurationError):
    """Raised when a package name is not a valid identifier."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid package name '{name}'")
        self.name = name


# ── Plugin registry errors ──────────────────────────────────────────────────


class RegistryFrozenError(PkgTemplatesError):
    """Raised when a registration is attempted after the registry is frozen."""

    def __init__(self, action: str = "register") -> None:
        super().__init__(f"Cannot {action}: plugin registry is frozen.")


class RegistryConflictError(PkgTemplatesError):
    """Raised when a plugin name collision is detected."""

    def __init__(self, name: str, detail: str = "") -> None:
        msg = f"Registration conflict at '{name}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class PluginLoadError(PkgTemplatesError):
    """Raised when a plugin entry point fails to import or raises during registration."""

    def __init__(self, plugin_name: str, reason: str = "") -> None:
        msg = f"Failed to load plugin '{plugin_name}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.plugin_name = plugin_name


# ── Collaborator errors ─────────────────────────────────────────────────────


class VcsError(PkgTemplatesError):
    """Raised when git repository initialization fails."""

    def __init__(self, command: str, detail: str = "") -> None:
        msg = f"git command failed: {command}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class WorkspaceError(PkgTemplatesError):
    """Raised when a generated package cannot be registered in the workspace."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Workspace registration failed: {detail}")
