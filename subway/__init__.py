"""
Subway Admin - 지하철 역/노선 관리 API
"""

__version__ = "1.0.0"
