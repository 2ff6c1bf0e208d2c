"""
Polar Bear Chatbot — topic classification, fallback replies and conversation blueprints.
"""

__version__ = "1.0.0"
