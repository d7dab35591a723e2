from .result import ResultSerializer, MyResultSerializer, ReportRowSerializer
from .submission import SubmittedAnswerSerializer, ExamSubmitSerializer, GuestExamSubmitSerializer

__all__ = [
    "ResultSerializer",
    "MyResultSerializer",
    "ReportRowSerializer",
    "SubmittedAnswerSerializer",
    "ExamSubmitSerializer",
    "GuestExamSubmitSerializer",
]
