from enum import Enum


class TaskType(str, Enum):
    """Types of requests requiring different model strengths."""
    REASONING = "reasoning"     # Topic analysis, paper critique
    CREATIVE = "creative"       # Topic inspiration
    STANDARD = "standard"       # General purpose default


class ModelRouter:
    """
    Picks OpenRouter models for a request kind.
    Optimizes for free-tier availability.
    """

    # Priority lists for different task types (best to worst)
    # Using OpenRouter model IDs

    REASONING_MODELS = [
        "google/gemini-2.5-pro",                  # Same model as the Gemini backend
        "deepseek/deepseek-r1:free",              # Strong reasoning
        "meta-llama/llama-3.3-70b-instruct:free", # Good fallback
        "openrouter/free",                        # Auto-router
    ]

    CREATIVE_MODELS = [
        "meta-llama/llama-3.3-70b-instruct:free", # Excellent prose
        "google/gemma-3-27b-it:free",             # Strong creative
        "mistralai/mistral-small-3.1-24b-instruct:free",
        "openrouter/free",
    ]

    DEFAULT_MODELS = REASONING_MODELS

    def get_candidate_models(self, task: TaskType | str) -> list[str]:
        """
        Get candidate models for a task, ordered by preference.

        Args:
            task: TaskType enum or string ("reasoning", "creative", "standard")

        Returns:
            List of model ID strings
        """
        if isinstance(task, str):
            try:
                task = TaskType(task.lower())
            except ValueError:
                raise ValueError(f"Unknown task type: {task}")

        if task == TaskType.REASONING:
            return list(self.REASONING_MODELS)
        elif task == TaskType.CREATIVE:
            return list(self.CREATIVE_MODELS)
        return list(self.DEFAULT_MODELS)

    @staticmethod
    def get_provider_name(model_id: str) -> str:
        """
        Extract provider name from OpenRouter model ID.
        e.g. "google/gemini-2.5-pro" -> "google"
        """
        if "/" in model_id:
            return model_id.split("/")[0]
        return "unknown"
