"""A rule-based expert system that suggests illnesses from yes/no symptom answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class Diagnosis(str, Enum):
    """Conditions the system can suggest, in report order."""

    ALLERGIES = "allergies"
    APPENDICITIS = "appendicitis"
    FLU = "flu"
    COLD = "cold"
    FEVER = "fever"
    STREP_THROAT = "strepthroat"
    FOOD_POISONING = "foodpoisioning"
    DIABETES = "Diabetes"


@dataclass(frozen=True)
class Condition:
    """A diagnosis and the symptom questions any one of which suggests it."""

    diagnosis: Diagnosis
    questions: tuple[str, ...]


CONDITIONS = (
    Condition(
        Diagnosis.ALLERGIES,
        (
            "Do you experience red watery eyes?",
            "Do you experience itching or swelling in the body?",
            "Do you have redness in the body?",
            "Are you experiencing itching in the throat?",
        ),
    ),
    Condition(
        Diagnosis.APPENDICITIS,
        (
            "Do you experience pain in the lower right part of your abdomen?",
            "Are you feeling nauseous?",
            "Are you experiencing loss of appetite?",
        ),
    ),
    Condition(
        Diagnosis.FLU,
        (
            "Do you have loss of sense of smell and taste?",
            "Do you have sore throat?",
            "Do you have cough, body and muscle ache?",
            "Do you experience shortness of breath?",
        ),
    ),
    Condition(
        Diagnosis.COLD,
        (
            "Do you have runny or stuffy nose?",
            "Do you have headache?",
            "Are you sneezing frequently?",
        ),
    ),
    Condition(
        Diagnosis.FEVER,
        (
            "Do you experience body chills?",
            "Do you have temperature higher than 37.5°C?",
            "Do you have headache?",
            "Do you have body ache?",
        ),
    ),
    Condition(
        Diagnosis.STREP_THROAT,
        (
            "Do you have tonsils?",
            "Do you experience pain in the throat, neck, and head?",
            "Do you have sore throat?",
        ),
    ),
    Condition(
        Diagnosis.FOOD_POISONING,
        (
            "Do you experience stomach ache?",
            "Are you feeling nauseous?",
            "Are you vomiting frequently?",
            "Do you have symptoms of diarrhea?",
        ),
    ),
    Condition(
        Diagnosis.DIABETES,
        (
            "Are you feeling thirsty frequently?",
            "Do you experience frequent urination?",
            "Did you have unexpected weight loss?",
            "Are you feeling tired and weak?",
        ),
    ),
)

_EXPLANATIONS = {
    Diagnosis.ALLERGIES: "You may have Allergy because of symptoms like red watery eyes, "
    "itching, swelling, throat itching, etc.",
    Diagnosis.FLU: "You may have COVID-19 flu because of symptoms like loss of smell and "
    "taste, fever, shortness of breath, etc.",
    Diagnosis.FEVER: "You may have Fever because of symptoms like body ache, high body "
    "temperature, headache, chills, etc.",
    Diagnosis.COLD: "You may have Cold because of symptoms like runny and stuffy nose, "
    "sneezing, cough, etc.",
    Diagnosis.APPENDICITIS: "You may have Appendicitis because of symptoms like pain in "
    "the lower right abdominal region, loss of appetite, etc.",
    Diagnosis.FOOD_POISONING: "You may have Food Poisoning because of symptoms like "
    "stomach ache, diarrhea, vomiting, etc.",
    Diagnosis.STREP_THROAT: "You may have Strep Throat because of symptoms like tonsils, "
    "neck and throat pain, sore throat, etc.",
    Diagnosis.DIABETES: "You may have Diabetes because of symptoms like frequent "
    "urination, weight loss, tiredness and weakness, etc.",
}

NO_RELEVANT = "No Relevant Diagnosis found."
NO_DIAGNOSIS = "No diagnosis found for the symptoms."


def parse_answer(response: str) -> bool:
    """True when the first non-blank character of response is Y or y."""
    stripped = response.strip()
    return bool(stripped) and stripped[0] in "Yy"


def diagnose(ask: Callable[[str], bool]) -> list[Diagnosis]:
    """Ask every symptom question and return the suggested diagnoses in order.

    Every question of every condition is asked, even once a condition matches.
    """
    found = []
    for condition in CONDITIONS:
        answers = [ask(question) for question in condition.questions]
        if any(answers):
            found.append(condition.diagnosis)
    return found


def explain(diagnosis: Diagnosis | str) -> str:
    """Why the system suggests diagnosis, or a notice that it knows none such."""
    try:
        return _EXPLANATIONS[Diagnosis(diagnosis)]
    except ValueError:
        return NO_RELEVANT


def report(diagnoses: Iterable[Diagnosis | str]) -> str:
    """The full report text for the suggested diagnoses."""
    diagnoses = list(diagnoses)
    parts = ["\n====================\n     START OF REPORT\n====================\n\n"]
    if diagnoses:
        parts.append("Based on your symptoms, the system suggests:\n\n")
        parts.extend(f"● {explain(diagnosis)}\n" for diagnosis in diagnoses)
    else:
        parts.append(NO_DIAGNOSIS + "\n")
    parts.append("\n==================\n     END OF REPORT\n==================\n\n")
    return "".join(parts)


def _answers(text: str) -> Iterator[str]:
    return (ch for ch in text if not ch.isspace())


def main(argv: list[str] | None = None) -> int:
    """Ask the symptom questions on standard input and print the report."""
    argparse.ArgumentParser(
        description="Suggest possible illnesses from yes/no symptom answers."
    ).parse_args(argv)
    answers = _answers(sys.stdin.read())

    def ask(question: str) -> bool:
        print(f"{question} (Y/N): ", end="")
        answer = next(answers, None)
        if answer is None:
            raise EOFError("unexpected end of input")
        return parse_answer(answer)

    try:
        diagnoses = diagnose(ask)
    except EOFError as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    print(report(diagnoses), end="")
    return 0