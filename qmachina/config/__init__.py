"""
Configuration module for qmachina.
"""

from .indicator_config import IndicatorConfig, ENV_PREFIX

__all__ = [
    'IndicatorConfig',
    'ENV_PREFIX',
]
