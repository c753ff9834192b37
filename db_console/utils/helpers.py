"""
Helper utilities for the Database Admin Console.

This module contains settings-file loading, backup URI validation and
secret masking used by the wizard and the task runner.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlsplit

import yaml

from db_console.core.exceptions import ValidationError


HOSTNAME_REGEXP = re.compile(
    r'^(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)*'
    r'[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?$',
    re.IGNORECASE
)
IP_REGEXP = re.compile(r'^(?:(?:25[0-5]|2[0-4]\d|1?\d?\d)\.){3}(?:25[0-5]|2[0-4]\d|1?\d?\d)$')

SENSITIVE_KEYS = [
    'password', 'passwd', 'pwd', 'secret', 'token',
    'api_key', 'private_key', 'passphrase', 'credential'
]


def load_config_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        file_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    if file_path.suffix.lower() not in ['.yaml', '.yml']:
        raise ValueError(f"Unsupported configuration file format: {file_path.suffix}")

    with open(file_path, 'r', encoding='utf-8') as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML format: {e}")


def normalize_uri(uri: str) -> str:
    """Turn Windows-style separators into forward slashes and trim whitespace."""
    return uri.replace('\\', '/').strip()


def check_uri(uri: str, expected_scheme: str) -> str:
    """
    Check that a backup location is a usable URI for a transport.
    
    Args:
        uri: Raw user input
        expected_scheme: Scheme the transport accepts (``nfs``, ``smb``)
    
    Returns:
        The normalized URI
    
    Raises:
        ValidationError: Listing every check the URI failed
    """
    normalized = normalize_uri(uri)
    failed: List[str] = []
    
    try:
        parts = urlsplit(normalized)
        hostname = parts.hostname or ""
    except ValueError:
        raise ValidationError(f"Not a URI: {normalized}", failed_checks=["parse"])
    
    if parts.scheme.lower() != expected_scheme:
        failed.append("scheme")
    if not (IP_REGEXP.match(hostname) or HOSTNAME_REGEXP.match(hostname)):
        failed.append("host")
    if parts.path in ("", "/"):
        failed.append("path")
    
    if failed:
        raise ValidationError(
            f"Invalid {expected_scheme} URI: {normalized}",
            failed_checks=failed
        )
    return normalized


def validate_uri(uri: str, expected_scheme: str) -> bool:
    """Return True if ``uri`` passes :func:`check_uri`."""
    try:
        check_uri(uri, expected_scheme)
    except ValidationError:
        return False
    return True


def sanitize_dict(data: Dict[str, Any], sensitive_keys: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Sanitize dictionary by masking sensitive values.
    
    Args:
        data: Dictionary to sanitize
        sensitive_keys: List of keys to mask (default: common sensitive keys)
    
    Returns:
        Sanitized dictionary
    """
    if sensitive_keys is None:
        sensitive_keys = SENSITIVE_KEYS
    
    def _sanitize_value(key: str, value: Any) -> Any:
        if isinstance(value, dict):
            return sanitize_dict(value, sensitive_keys)
        elif any(sensitive_key in key.lower() for sensitive_key in sensitive_keys):
            return "***MASKED***" if value else value
        else:
            return value
    
    return {key: _sanitize_value(key, value) for key, value in data.items()}
