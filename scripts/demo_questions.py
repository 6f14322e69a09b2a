#!/usr/bin/env python3

import random
import sys

import pandas as pd

from flashquiz import StudySet, Conditions
from flashquiz.builder import build_set_from_frames
from flashquiz.log import setup_logging


def load_set(argv) -> StudySet:
    if len(argv) < 2:
        print("No spreadsheet given, using the example set")
        return StudySet.example()

    # Expects sheets named 'cards' (front, back) and 'mc' (question, answer, decoys)
    sheets = pd.read_excel(argv[1], sheet_name=None)
    return build_set_from_frames(sheets.get('cards'), sheets.get('mc'))


def main():
    setup_logging('DEBUG' if '-v' in sys.argv else 'INFO')
    args = [a for a in sys.argv if a != '-v']

    study_set = load_set(args)
    rng = random.Random(0)

    questions = study_set.questions(Conditions.INCLUDE_ALL)
    print(f"{len(questions)} questions\n")

    for i, question in enumerate(questions, 1):
        text = question.question(rng)
        if text is None:
            print(f"{i}. (nothing to show, skipped)")
            continue

        print(f"{i}. {text}   [{question.recall_type.value}]")
        answers = question.mc_answers(4, rng)
        if answers is None:
            print(f"   Answer: {'; '.join(question.answers())}")
            continue
        for j, answer in enumerate(answers):
            marker = '*' if j == answers.correct_index else ' '
            print(f"   {marker} {chr(ord('a') + j)}) {answer}")


if __name__ == "__main__":
    main()
