import pytest
from research_advisor.utils.model_router import ModelRouter, TaskType

@pytest.fixture
def router():
    return ModelRouter()

def test_reasoning_prefers_gemini(router):
    candidates = router.get_candidate_models(TaskType.REASONING)
    assert candidates[0] == "google/gemini-2.5-pro"
    assert candidates[-1] == "openrouter/free"

def test_creative_list(router):
    candidates = router.get_candidate_models(TaskType.CREATIVE)
    assert candidates == ModelRouter.CREATIVE_MODELS

def test_standard_falls_back_to_default(router):
    assert router.get_candidate_models(TaskType.STANDARD) == ModelRouter.DEFAULT_MODELS

def test_string_task_is_accepted(router):
    assert router.get_candidate_models("Creative") == ModelRouter.CREATIVE_MODELS

def test_unknown_task_raises(router):
    with pytest.raises(ValueError, match="Unknown task type"):
        router.get_candidate_models("summarise")

def test_returns_a_copy(router):
    # Callers may reorder their list without touching the class-level one
    candidates = router.get_candidate_models(TaskType.REASONING)
    candidates.clear()
    assert router.get_candidate_models(TaskType.REASONING)

def test_provider_name():
    assert ModelRouter.get_provider_name("deepseek/deepseek-r1:free") == "deepseek"
    assert ModelRouter.get_provider_name("local-model") == "unknown"
