from rest_framework.routers import SimpleRouter

from .views import SectionViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"sections", SectionViewSet, basename="section")

urlpatterns = router.urls
