"""
Configuration package for the Company ERP API.
"""

from company_erp.config.settings import Settings, get_settings, parse_duration

__all__ = ["Settings", "get_settings", "parse_duration"]
