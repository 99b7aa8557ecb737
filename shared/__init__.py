"""
ElfHead Shared Module
=====================

Configuration, logging and console helpers shared by the ElfHead tools.
"""

from shared.config import ElfHeadConfig

__all__ = ["ElfHeadConfig"]
