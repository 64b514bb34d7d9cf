"""Configuration validation"""

from typing import List

from ..models.config import AppConfig
from .constants import validate_static_tables
from .errors import ConfigurationError


class ConfigValidator:
    """Validate application configuration for consistency and completeness"""

    def __init__(self, config: AppConfig):
        self.config = config
        self.errors: List[str] = []

    def validate_static_tables(self) -> None:
        """Every provider and model must have a lookup entry"""
        try:
            validate_static_tables()
        except ConfigurationError as e:
            self.errors.append(str(e))

    def validate_unique_provider_names(self) -> None:
        """Validate that each provider is configured once"""
        provider_names = [p.name.value for p in self.config.providers]
        duplicates = {name for name in provider_names if provider_names.count(name) > 1}

        if duplicates:
            self.errors.append(
                f"Duplicate provider names found: {', '.join(sorted(duplicates))}"
            )

    def validate_default_provider(self) -> None:
        """Validate that the default provider has credentials"""
        default_provider = self.config.completion.default_provider
        if self.config.get_provider(default_provider) is None:
            self.errors.append(
                f"Default provider '{default_provider.value}' is not configured"
            )

    def validate_all(self) -> List[str]:
        """
        Run all validation checks

        Returns:
            List of validation error messages (empty if valid)
        """
        self.errors = []

        self.validate_static_tables()
        self.validate_unique_provider_names()
        self.validate_default_provider()

        return self.errors

    def is_valid(self) -> bool:
        return not self.validate_all()


def validate_config(config: AppConfig) -> None:
    """
    Validate configuration and raise exception if invalid

    Raises:
        ConfigurationError: If configuration is invalid
    """
    validator = ConfigValidator(config)
    errors = validator.validate_all()

    if errors:
        error_message = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        raise ConfigurationError(error_message)
