"""
Command 처리 모듈

메시지 파싱, Command 등록 테이블, 라우팅 및 기본 핸들러
"""

from bot.command.handlers import LedgerCommands, build_default_registry
from bot.command.parser import AmountParseResult, ParsedMessage, parse_amount, parse_message
from bot.command.registry import (
    Attachment,
    Command,
    CommandContext,
    CommandRegistry,
    CommandReply,
)
from bot.command.router import CommandRouter

__all__ = [
    "Attachment",
    "AmountParseResult",
    "Command",
    "CommandContext",
    "CommandRegistry",
    "CommandReply",
    "CommandRouter",
    "LedgerCommands",
    "ParsedMessage",
    "build_default_registry",
    "parse_amount",
    "parse_message",
]
