"""
HEKAYATY API

故事创作与阅读平台的 REST 后端
"""

__version__ = "1.0.0"
