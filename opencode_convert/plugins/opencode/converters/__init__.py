"""Category converters for agents, commands, skills and rules."""

from .agents import AgentConverter
from .commands import COMMAND_AGENTS, CommandConverter
from .passthrough import DirectoryMirrorConverter, RuleConverter, SkillConverter

__all__ = [
    "AgentConverter",
    "CommandConverter",
    "COMMAND_AGENTS",
    "DirectoryMirrorConverter",
    "RuleConverter",
    "SkillConverter",
]
