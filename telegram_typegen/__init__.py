"""Генератор TypeScript деклараций для Telegram Bot API"""

__version__ = "0.1.0"
