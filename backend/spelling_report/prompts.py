from __future__ import annotations
import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from .pipeline import PipelineState


def _words_as_json(state: "PipelineState") -> str:
	return json.dumps(
		[{"correct": w.correct, "attempt": w.attempt} for w in state.incorrect_words],
		ensure_ascii=False,
		separators=(",", ":"),
	)


def build_analyst_prompt(state: "PipelineState") -> str:
	return (
		"You are a spelling analyst. Your job is to analyze the spelling mistakes of a student and identify patterns. "
		"Do not write a report for the student, just provide a technical analysis.\n\n"
		f"Student: {state.student_name}\n"
		f"Grade: {state.grade}\n"
		f"Incorrect words (correct -> student's attempt): {_words_as_json(state)}\n\n"
		"Based on these errors, identify the likely reasons for the mistakes "
		"(e.g., phonetic confusion, vowel swaps, silent letters, common typos). "
		"Provide a concise, bullet-pointed analysis."
	)


def build_reporter_prompt(state: "PipelineState") -> str:
	return (
		"You are a friendly and encouraging teacher. Write a personalized report for a student based on the analysis "
		"of their spelling mistakes. The report should be in HTML format.\n\n"
		f"Student: {state.student_name}\n"
		f"Grade: {state.grade}\n"
		f"Score: {state.score}/{state.total_items}\n"
		f"Analysis of mistakes: {state.analysis}\n\n"
		"Write a report that is positive and provides specific, actionable advice. "
		"Start with encouragement, then explain the patterns of mistakes in simple terms, "
		"and end with 2-3 clear tips for improvement. "
		"Format the output as clean HTML with paragraphs (<p>) and unordered lists (<ul><li>)."
	)
