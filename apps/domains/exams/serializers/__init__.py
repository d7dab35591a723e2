from .exam import ExamSerializer, ExamDetailSerializer, ExamWriteSerializer, ExamStartSerializer
from .question import (
    AnswerChoiceSerializer,
    QuestionSerializer,
    QuestionWriteSerializer,
    QuestionImportSerializer,
    QuestionReportCreateSerializer,
)

__all__ = [
    "ExamSerializer",
    "ExamDetailSerializer",
    "ExamWriteSerializer",
    "ExamStartSerializer",
    "AnswerChoiceSerializer",
    "QuestionSerializer",
    "QuestionWriteSerializer",
    "QuestionImportSerializer",
    "QuestionReportCreateSerializer",
]
