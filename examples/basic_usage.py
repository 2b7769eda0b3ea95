#!/usr/bin/env python3
"""
Basic autotypo Usage Example

This example demonstrates the core workflow:
1. Check text and inspect the corrections
2. Rewrite text in place with auto-apply
3. Teach the engine project-specific fixes
4. Drive a text field through the headless input binding
"""

from autotypo import CorrectionEngine, EngineConfig, InputBinding


class TextBox:
    """Stand-in for a GUI text field."""

    def __init__(self, text: str):
        self.text = text
        self.cursor = len(text)

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def get_cursor(self) -> int:
        return self.cursor

    def set_cursor(self, position: int) -> None:
        self.cursor = position


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Check text
    # ─────────────────────────────────────────────────────────────────────────

    engine = CorrectionEngine()
    report = engine.correct_text("I beleive teh cat is sleeping.")

    for record in report.corrections:
        print(
            f"{record.original!r} -> {record.corrected!r} "
            f"at {record.start}-{record.end} ({record.strategy.value}, {record.confidence})"
        )

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Auto-apply
    # ─────────────────────────────────────────────────────────────────────────

    engine.update_options(auto_apply_corrections=True)
    print(engine.correct_text("Teh meeting is tommorow, dont be late.").corrected)

    # Presets trade recall for safety
    cautious = CorrectionEngine(EngineConfig.conservative(auto_apply_corrections=True))
    print(cautious.correct_text("a mute point").corrected)

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Custom and learned dictionaries
    # ─────────────────────────────────────────────────────────────────────────

    engine.import_dictionary({"pyhton": "python", "numpyy": "numpy"})
    engine.learn_word_correction("widgit", "widget")
    print(engine.correct_text("Pyhton widgit").corrected)

    # The learned dictionary is plain data; persisting it is up to you
    learned = engine.export_learning_dictionary()
    print(f"Learned: {learned}")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Input binding
    # ─────────────────────────────────────────────────────────────────────────

    box = TextBox("See you tommorow")
    with InputBinding(box, suggestion_delay=0.2) as binding:
        binding.check_now()
        print(f"Suggestions: {binding.suggestions}")
        binding.handle_key("ArrowDown")
        binding.handle_key("Enter")
    print(box.text)


if __name__ == "__main__":
    main()
