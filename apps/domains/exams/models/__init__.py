# apps/domains/exams/models/__init__.py
from .exam import ExamTemplate
from .question import Question, AnswerChoice
from .question_report import QuestionReport

__all__ = [
    "ExamTemplate",
    "Question",
    "AnswerChoice",
    "QuestionReport",
]
