"""Message bus outputs for normalized observation updates."""

from .jsonl_writer import JSONLinesWriter
from .kafka_writer import KafkaWriter
from .manager import OutputManager
from .protocols import MessageBus

__all__ = ["JSONLinesWriter", "KafkaWriter", "MessageBus", "OutputManager"]
