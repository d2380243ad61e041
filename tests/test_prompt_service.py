from app.services.prompt_service import (
    BASE_SYSTEM_PROMPT,
    MODEL_DIRECTIVES,
    STRATEGY_DIRECTIVES,
    build_system_prompt,
)


def test_base_prompt_only():
    assert build_system_prompt(None, None) == BASE_SYSTEM_PROMPT
    assert build_system_prompt("gpt-4o", "unknown") == BASE_SYSTEM_PROMPT


def test_o3_with_cot_has_both_directives_once():
    prompt = build_system_prompt("o3", "cot")
    assert prompt.startswith(BASE_SYSTEM_PROMPT)
    assert prompt.count(MODEL_DIRECTIVES["o3"]) == 1
    assert prompt.count(STRATEGY_DIRECTIVES["cot"]) == 1
    assert prompt.index(MODEL_DIRECTIVES["o3"]) < prompt.index(STRATEGY_DIRECTIVES["cot"])


def test_directives_are_space_separated():
    prompt = build_system_prompt("gpt-5-nano", "persona")
    assert prompt == " ".join(
        [BASE_SYSTEM_PROMPT, MODEL_DIRECTIVES["gpt-5-nano"], STRATEGY_DIRECTIVES["persona"]]
    )


def test_directive_keys_off_requested_code_not_real_model():
    # gpt-5.2-thinking 實際跑 gpt-5.2，但不套用 gpt-5.2 的人設
    assert build_system_prompt("gpt-5.2-thinking", None) == BASE_SYSTEM_PROMPT
    assert MODEL_DIRECTIVES["gpt-5.2"] in build_system_prompt("gpt-5.2", None)
