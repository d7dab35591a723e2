from rest_framework.routers import SimpleRouter

from .views import SubjectViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"subjects", SubjectViewSet, basename="subject")

urlpatterns = router.urls
