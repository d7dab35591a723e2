# apps/domains/exams/urls.py
from rest_framework.routers import SimpleRouter

from .views.exam_view import ExamViewSet

router = SimpleRouter(trailing_slash=False)
router.register("exams", ExamViewSet, basename="exam")

urlpatterns = router.urls
