"""Agent-facing wrappers around the engines."""

from .feedback import build_ogm_feedback
from .ogm_tool import ValidateOgmArgs, ValidateOgmTool, describe_result

__all__ = ["ValidateOgmArgs", "ValidateOgmTool", "build_ogm_feedback", "describe_result"]
