"""Static model capability tables, one tuple per channel.

The GitHub Copilot table is regenerated from the live ``/models`` listing;
see :mod:`gateway_registry.catalog.listing` for the conversion rules.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType

from gateway_registry.catalog.types import (
    EFFORT_LEVELS,
    ModelDescriptor,
    ModelOverride,
    ThinkingBudget,
    ThinkingLevels,
)

_CHAT = frozenset({"/chat/completions"})
_RESPONSES = frozenset({"/responses"})
_CHAT_AND_RESPONSES = frozenset({"/chat/completions", "/responses"})

# ---------------------------------------------------------------------------
# Anthropic
# ---------------------------------------------------------------------------

_CLAUDE_THINKING = ThinkingBudget(min=1024, max=128000, zero_allowed=True, dynamic_allowed=False)

CLAUDE_MODELS: tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id="claude-opus-4-5-20251101",
        owned_by="anthropic",
        channel="claude",
        display_name="Claude 4.5 Opus",
        description="Premium model combining maximum intelligence with practical performance",
        created=1761955200,
        context_length=200000,
        max_completion_tokens=64000,
        reasoning=_CLAUDE_THINKING,
    ),
    ModelDescriptor(
        id="claude-sonnet-4-5-20250929",
        owned_by="anthropic",
        channel="claude",
        display_name="Claude 4.5 Sonnet",
        description="Best model for complex agents and coding",
        created=1759104000,
        context_length=200000,
        max_completion_tokens=64000,
        reasoning=_CLAUDE_THINKING,
    ),
    ModelDescriptor(
        id="claude-haiku-4-5-20251001",
        owned_by="anthropic",
        channel="claude",
        display_name="Claude 4.5 Haiku",
        description="Fastest model with near-frontier intelligence",
        created=1759276800,
        context_length=200000,
        max_completion_tokens=64000,
        reasoning=_CLAUDE_THINKING,
    ),
    ModelDescriptor(
        id="claude-opus-4-1-20250805",
        owned_by="anthropic",
        channel="claude",
        display_name="Claude 4.1 Opus",
        created=1722945600,
        context_length=200000,
        max_completion_tokens=32000,
        reasoning=_CLAUDE_THINKING,
    ),
    ModelDescriptor(
        id="claude-opus-4-20250514",
        owned_by="anthropic",
        channel="claude",
        display_name="Claude 4 Opus",
        created=1715644800,
        context_length=200000,
        max_completion_tokens=32000,
        reasoning=_CLAUDE_THINKING,
    ),
    ModelDescriptor(
        id="claude-sonnet-4-20250514",
        owned_by="anthropic",
        channel="claude",
        display_name="Claude 4 Sonnet",
        created=1715644800,
        context_length=200000,
        max_completion_tokens=64000,
        reasoning=_CLAUDE_THINKING,
    ),
    ModelDescriptor(
        id="claude-3-7-sonnet-20250219",
        owned_by="anthropic",
        channel="claude",
        display_name="Claude 3.7 Sonnet",
        created=1708300800,
        context_length=200000,
        max_completion_tokens=8192,
        reasoning=_CLAUDE_THINKING,
    ),
    ModelDescriptor(
        id="claude-3-5-haiku-20241022",
        owned_by="anthropic",
        channel="claude",
        display_name="Claude 3.5 Haiku",
        created=1729555200,
        context_length=200000,
        max_completion_tokens=8192,
    ),
)

# ---------------------------------------------------------------------------
# Google
# ---------------------------------------------------------------------------

# Shared Gemini definitions; each Google channel re-tags the ones it serves.
_GEMINI: dict[str, ModelDescriptor] = {
    m.id: m
    for m in (
        ModelDescriptor(
            id="gemini-2.5-pro",
            owned_by="google",
            channel="gemini",
            display_name="Gemini 2.5 Pro",
            description="Stable release (June 17th, 2025) of Gemini 2.5 Pro",
            created=1750118400,
            context_length=1048576,
            max_completion_tokens=65536,
            reasoning=ThinkingBudget(min=128, max=32768, zero_allowed=False, dynamic_allowed=True),
        ),
        ModelDescriptor(
            id="gemini-2.5-flash",
            owned_by="google",
            channel="gemini",
            display_name="Gemini 2.5 Flash",
            description="Stable version of Gemini 2.5 Flash, our mid-size multimodal model",
            created=1750118400,
            context_length=1048576,
            max_completion_tokens=65536,
            reasoning=ThinkingBudget(min=0, max=24576, zero_allowed=True, dynamic_allowed=True),
        ),
        ModelDescriptor(
            id="gemini-2.5-flash-lite",
            owned_by="google",
            channel="gemini",
            display_name="Gemini 2.5 Flash Lite",
            description="Our smallest and most cost effective model, built for at scale usage",
            created=1753142400,
            context_length=1048576,
            max_completion_tokens=65536,
            reasoning=ThinkingBudget(min=512, max=24576, zero_allowed=True, dynamic_allowed=True),
        ),
        ModelDescriptor(
            id="gemini-3-pro-preview",
            owned_by="google",
            channel="gemini",
            display_name="Gemini 3 Pro Preview",
            created=1737158400,
            context_length=1048576,
            max_completion_tokens=65536,
            reasoning=ThinkingLevels(("low", "high")),
        ),
        ModelDescriptor(
            id="gemini-3-flash-preview",
            owned_by="google",
            channel="gemini",
            display_name="Gemini 3 Flash Preview",
            created=1765929600,
            context_length=1048576,
            max_completion_tokens=65536,
            reasoning=EFFORT_LEVELS,
        ),
        ModelDescriptor(
            id="gemini-3-pro-image-preview",
            owned_by="google",
            channel="gemini",
            display_name="Gemini 3 Pro Image Preview",
            created=1737158400,
            context_length=65536,
            max_completion_tokens=32768,
        ),
        ModelDescriptor(
            id="gemini-pro-latest",
            owned_by="google",
            channel="gemini",
            display_name="Gemini Pro Latest",
            description="Latest release of Gemini Pro",
            context_length=1048576,
            max_completion_tokens=65536,
            reasoning=ThinkingBudget(min=128, max=32768, zero_allowed=False, dynamic_allowed=True),
        ),
        ModelDescriptor(
            id="gemini-flash-latest",
            owned_by="google",
            channel="gemini",
            display_name="Gemini Flash Latest",
            description="Latest release of Gemini Flash",
            context_length=1048576,
            max_completion_tokens=65536,
            reasoning=ThinkingBudget(min=0, max=24576, zero_allowed=True, dynamic_allowed=True),
        ),
    )
}


def _google(channel: str, *model_ids: str) -> tuple[ModelDescriptor, ...]:
    return tuple(replace(_GEMINI[model_id], channel=channel) for model_id in model_ids)


GEMINI_MODELS = _google(
    "gemini",
    "gemini-2.5-pro",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-3-pro-preview",
    "gemini-3-flash-preview",
    "gemini-3-pro-image-preview",
)

GEMINI_VERTEX_MODELS = _google(
    "vertex",
    "gemini-2.5-pro",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-3-pro-preview",
    "gemini-3-pro-image-preview",
)

GEMINI_CLI_MODELS = _google(
    "gemini-cli",
    "gemini-2.5-pro",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-3-pro-preview",
)

AISTUDIO_MODELS = _google(
    "aistudio",
    "gemini-2.5-pro",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-3-pro-preview",
    "gemini-pro-latest",
    "gemini-flash-latest",
)

# ---------------------------------------------------------------------------
# OpenAI (Codex)
# ---------------------------------------------------------------------------


def _codex(model_id: str, display_name: str, created: int, **kwargs) -> ModelDescriptor:
    kwargs.setdefault("reasoning", EFFORT_LEVELS)
    return ModelDescriptor(
        id=model_id,
        owned_by="openai",
        channel="codex",
        display_name=display_name,
        created=created,
        context_length=400000,
        max_completion_tokens=128000,
        supported_endpoints=_RESPONSES,
        **kwargs,
    )


OPENAI_MODELS: tuple[ModelDescriptor, ...] = (
    _codex("gpt-5", "GPT 5", 1754524800, description="Stable version of GPT 5"),
    _codex("gpt-5-codex", "GPT 5 Codex", 1757894400,
           reasoning=ThinkingLevels(("low", "medium", "high"))),
    _codex("gpt-5-codex-mini", "GPT 5 Codex Mini", 1762473600,
           reasoning=ThinkingLevels(("medium", "high"))),
    _codex("gpt-5.1", "GPT 5.1", 1762905600,
           reasoning=ThinkingLevels(("none", "low", "medium", "high"))),
    _codex("gpt-5.1-codex", "GPT 5.1 Codex", 1762905600,
           reasoning=ThinkingLevels(("low", "medium", "high"))),
    _codex("gpt-5.1-codex-mini", "GPT 5.1 Codex Mini", 1762905600,
           reasoning=ThinkingLevels(("medium", "high"))),
    _codex("gpt-5.1-codex-max", "GPT 5.1 Codex Max", 1763424000,
           reasoning=ThinkingLevels(("low", "medium", "high", "xhigh"))),
    _codex("gpt-5.2", "GPT 5.2", 1765440000,
           reasoning=ThinkingLevels(("none", "low", "medium", "high", "xhigh"))),
)

# ---------------------------------------------------------------------------
# Qwen / iFlow
# ---------------------------------------------------------------------------

QWEN_MODELS: tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id="qwen3-coder-plus",
        owned_by="qwen",
        channel="qwen",
        display_name="Qwen3 Coder Plus",
        description="Advanced code generation and understanding model",
        created=1753228800,
        context_length=32768,
        max_completion_tokens=8192,
        supported_endpoints=_CHAT,
    ),
    ModelDescriptor(
        id="qwen3-coder-flash",
        owned_by="qwen",
        channel="qwen",
        display_name="Qwen3 Coder Flash",
        description="Fast code generation model",
        created=1753228800,
        context_length=8192,
        max_completion_tokens=2048,
        supported_endpoints=_CHAT,
    ),
    ModelDescriptor(
        id="vision-model",
        owned_by="qwen",
        channel="qwen",
        display_name="Qwen3 Vision Model",
        description="Vision model",
        created=1758672000,
        context_length=32768,
        max_completion_tokens=2048,
        supported_endpoints=_CHAT,
    ),
)


def _iflow(model_id: str, display_name: str, description: str, created: int, **kwargs) -> ModelDescriptor:
    return ModelDescriptor(
        id=model_id,
        owned_by="iflow",
        channel="iflow",
        display_name=display_name,
        description=description,
        created=created,
        supported_endpoints=_CHAT,
        **kwargs,
    )


IFLOW_MODELS: tuple[ModelDescriptor, ...] = (
    _iflow("tstars2.0", "TStars-2.0", "iFlow TStars-2.0 multimodal assistant", 1746489600),
    _iflow("qwen3-coder-plus", "Qwen3-Coder-Plus", "Qwen3 Coder Plus code generation", 1753228800),
    _iflow("qwen3-max", "Qwen3-Max", "Qwen3 flagship model", 1758672000),
    _iflow("qwen3-vl-plus", "Qwen3-VL-Plus", "Qwen3 multimodal vision-language", 1758672000),
    _iflow("qwen3-max-preview", "Qwen3-Max-Preview", "Qwen3 Max preview build", 1757030400),
    _iflow("kimi-k2-0905", "Kimi-K2-Instruct-0905", "Moonshot Kimi K2 instruct 0905", 1757030400),
    _iflow("glm-4.6", "GLM-4.6", "Zhipu GLM 4.6 general model", 1759190400,
           reasoning=ThinkingLevels(("none", "auto", "minimal", "low", "medium", "high", "xhigh"))),
    _iflow("kimi-k2", "Kimi-K2", "Moonshot Kimi K2 general model", 1752192000),
    _iflow("deepseek-v3.2", "DeepSeek-V3.2-Exp", "DeepSeek V3.2 experimental", 1759104000),
    _iflow("deepseek-v3.1", "DeepSeek-V3.1-Terminus", "DeepSeek V3.1 Terminus", 1756339200),
    _iflow("deepseek-r1", "DeepSeek-R1", "DeepSeek reasoning model R1", 1737331200),
    _iflow("deepseek-v3", "DeepSeek-V3-671B", "DeepSeek V3 671B", 1734307200),
    _iflow("qwen3-32b", "Qwen3-32B", "Qwen3 32B", 1747094400),
    _iflow("qwen3-235b", "Qwen3-235B-A22B", "Qwen3 235B A22B", 1753401600),
)

# ---------------------------------------------------------------------------
# GitHub Copilot
# ---------------------------------------------------------------------------

_COPILOT_CREATED = 1768908139  # 2026-01-20


def _copilot(
    model_id: str,
    display_name: str,
    context_length: int,
    max_completion_tokens: int,
    supported_endpoints: frozenset[str] = _CHAT,
    reasoning=None,
) -> ModelDescriptor:
    return ModelDescriptor(
        id=model_id,
        owned_by="github-copilot",
        channel="github-copilot",
        display_name=display_name,
        description=f"{display_name} via GitHub Copilot",
        created=_COPILOT_CREATED,
        context_length=context_length,
        max_completion_tokens=max_completion_tokens,
        supported_endpoints=supported_endpoints,
        reasoning=reasoning,
    )


def _copilot_budget(low: int, high: int) -> ThinkingBudget:
    return ThinkingBudget(min=low, max=high, zero_allowed=False, dynamic_allowed=False)


GITHUB_COPILOT_MODELS: tuple[ModelDescriptor, ...] = (
    _copilot("claude-haiku-4.5", "Claude Haiku 4.5", 144000, 16000, reasoning=_copilot_budget(1024, 32000)),
    _copilot("claude-opus-4.5", "Claude Opus 4.5", 160000, 16000, reasoning=_copilot_budget(1024, 32000)),
    _copilot("claude-sonnet-4", "Claude Sonnet 4", 216000, 16000, reasoning=_copilot_budget(1024, 32000)),
    _copilot("claude-sonnet-4.5", "Claude Sonnet 4.5", 144000, 16000, reasoning=_copilot_budget(1024, 32000)),
    _copilot("gemini-2.5-pro", "Gemini 2.5 Pro", 128000, 64000, reasoning=_copilot_budget(128, 32768)),
    _copilot("gemini-3-flash-preview", "Gemini 3 Flash (Preview)", 128000, 64000,
             reasoning=_copilot_budget(256, 32000)),
    _copilot("gemini-3-pro-preview", "Gemini 3 Pro (Preview)", 128000, 64000,
             reasoning=_copilot_budget(258, 32000)),
    _copilot("gpt-3.5-turbo", "GPT 3.5 Turbo", 16384, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-3.5-turbo-0613", "GPT 3.5 Turbo", 16384, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4", "GPT 4", 32768, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4-0125-preview", "GPT 4 Turbo", 128000, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4-0613", "GPT 4", 32768, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4-o-preview", "GPT-4o", 128000, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4.1", "GPT-4.1", 128000, 16384, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4.1-2025-04-14", "GPT-4.1", 128000, 16384, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4o", "GPT-4o", 128000, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4o-2024-05-13", "GPT-4o", 128000, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4o-2024-08-06", "GPT-4o", 128000, 16384, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4o-2024-11-20", "GPT-4o", 128000, 16384, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4o-mini", "GPT-4o mini", 128000, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-4o-mini-2024-07-18", "GPT-4o mini", 128000, 4096, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5", "GPT-5", 400000, 128000, _CHAT_AND_RESPONSES, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5-codex", "GPT-5-Codex (Preview)", 400000, 128000, _RESPONSES, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5-mini", "GPT-5 mini", 264000, 64000, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5.1", "GPT-5.1", 264000, 64000, _CHAT_AND_RESPONSES, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5.1-codex", "GPT-5.1-Codex", 400000, 128000, _RESPONSES, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5.1-codex-max", "GPT-5.1-Codex-Max", 400000, 128000, _RESPONSES, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5.1-codex-mini", "GPT-5.1-Codex-Mini", 400000, 128000, _RESPONSES, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5.2", "GPT-5.2", 264000, 64000, _CHAT_AND_RESPONSES, reasoning=EFFORT_LEVELS),
    _copilot("gpt-5.2-codex", "GPT-5.2-Codex", 400000, 128000, _RESPONSES, reasoning=EFFORT_LEVELS),
    _copilot("grok-code-fast-1", "Grok Code Fast 1", 128000, 64000),
    _copilot("text-embedding-3-small", "Embedding V3 small", 128000, 16384, frozenset()),
    _copilot("text-embedding-3-small-inference", "Embedding V3 small (Inference)", 128000, 16384, frozenset()),
    _copilot("text-embedding-ada-002", "Embedding V2 Ada", 128000, 16384, frozenset()),
)

# ---------------------------------------------------------------------------
# Kiro / Amazon Q (AWS CodeWhisperer)
# ---------------------------------------------------------------------------

_KIRO_CREATED = 1732752000
_KIRO_THINKING = ThinkingBudget(min=1024, max=32000, zero_allowed=True, dynamic_allowed=True)


def _kiro(model_id: str, display_name: str, description: str) -> ModelDescriptor:
    return ModelDescriptor(
        id=model_id,
        owned_by="aws",
        channel="kiro",
        display_name=display_name,
        description=description,
        created=_KIRO_CREATED,
        context_length=200000,
        max_completion_tokens=64000,
        reasoning=_KIRO_THINKING,
    )


KIRO_MODELS: tuple[ModelDescriptor, ...] = (
    _kiro("kiro-auto", "Kiro Auto", "Automatic model selection by Kiro"),
    _kiro("kiro-claude-opus-4-5", "Kiro Claude Opus 4.5", "Claude Opus 4.5 via Kiro (2.2x credit)"),
    _kiro("kiro-claude-sonnet-4-5", "Kiro Claude Sonnet 4.5", "Claude Sonnet 4.5 via Kiro (1.3x credit)"),
    _kiro("kiro-claude-sonnet-4", "Kiro Claude Sonnet 4", "Claude Sonnet 4 via Kiro (1.3x credit)"),
    _kiro("kiro-claude-haiku-4-5", "Kiro Claude Haiku 4.5", "Claude Haiku 4.5 via Kiro (0.4x credit)"),
    # Agentic variants use chunked writes for coding agents.
    _kiro("kiro-claude-opus-4-5-agentic", "Kiro Claude Opus 4.5 (Agentic)",
          "Claude Opus 4.5 optimized for coding agents (chunked writes)"),
    _kiro("kiro-claude-sonnet-4-5-agentic", "Kiro Claude Sonnet 4.5 (Agentic)",
          "Claude Sonnet 4.5 optimized for coding agents (chunked writes)"),
    _kiro("kiro-claude-sonnet-4-agentic", "Kiro Claude Sonnet 4 (Agentic)",
          "Claude Sonnet 4 optimized for coding agents (chunked writes)"),
    _kiro("kiro-claude-haiku-4-5-agentic", "Kiro Claude Haiku 4.5 (Agentic)",
          "Claude Haiku 4.5 optimized for coding agents (chunked writes)"),
)


def _amazonq(model_id: str, display_name: str, description: str) -> ModelDescriptor:
    # Amazon Q shares the Kiro executor, hence channel "kiro".
    return ModelDescriptor(
        id=model_id,
        owned_by="aws",
        channel="kiro",
        display_name=display_name,
        description=description,
        created=_KIRO_CREATED,
        context_length=200000,
        max_completion_tokens=64000,
    )


AMAZONQ_MODELS: tuple[ModelDescriptor, ...] = (
    _amazonq("amazonq-auto", "Amazon Q Auto", "Automatic model selection by Amazon Q"),
    _amazonq("amazonq-claude-opus-4.5", "Amazon Q Claude Opus 4.5", "Claude Opus 4.5 via Amazon Q (2.2x credit)"),
    _amazonq("amazonq-claude-sonnet-4.5", "Amazon Q Claude Sonnet 4.5",
             "Claude Sonnet 4.5 via Amazon Q (1.3x credit)"),
    _amazonq("amazonq-claude-sonnet-4", "Amazon Q Claude Sonnet 4", "Claude Sonnet 4 via Amazon Q (1.3x credit)"),
    _amazonq("amazonq-claude-haiku-4.5", "Amazon Q Claude Haiku 4.5", "Claude Haiku 4.5 via Amazon Q (0.4x credit)"),
)

# ---------------------------------------------------------------------------
# Antigravity (keyed overrides, no static array)
# ---------------------------------------------------------------------------

_ANTIGRAVITY_CLAUDE = ModelOverride(
    reasoning=ThinkingBudget(min=1024, max=200000, zero_allowed=False, dynamic_allowed=True),
    max_completion_tokens=64000,
)

ANTIGRAVITY_MODEL_CONFIG: Mapping[str, ModelOverride | None] = MappingProxyType({
    "gemini-2.5-flash": ModelOverride(
        reasoning=ThinkingBudget(min=0, max=24576, zero_allowed=True, dynamic_allowed=True),
    ),
    "gemini-2.5-flash-lite": ModelOverride(
        reasoning=ThinkingBudget(min=0, max=24576, zero_allowed=True, dynamic_allowed=True),
    ),
    "gemini-2.5-computer-use-preview-10-2025": ModelOverride(
        reasoning=ThinkingBudget(min=128, max=32768, zero_allowed=False, dynamic_allowed=True),
    ),
    "gemini-3-pro-preview": ModelOverride(reasoning=ThinkingLevels(("low", "high"))),
    "gemini-3-pro-image-preview": ModelOverride(reasoning=ThinkingLevels(("low", "high"))),
    "gemini-3-flash-preview": ModelOverride(reasoning=EFFORT_LEVELS),
    "gemini-claude-sonnet-4-5-thinking": _ANTIGRAVITY_CLAUDE,
    "gemini-claude-opus-4-5-thinking": _ANTIGRAVITY_CLAUDE,
    "gpt-oss-120b-medium": ModelOverride(),
})
