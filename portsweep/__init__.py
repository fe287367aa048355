"""
Portsweep - concurrent TCP connect scanner with banner grabbing.
"""

from .config import ScanConfig
from .models import ScanReport, ScanResult, ScanTask
from .scanner import PortScanner

__version__ = "1.0.0"

__all__ = ["PortScanner", "ScanConfig", "ScanReport", "ScanResult", "ScanTask"]
