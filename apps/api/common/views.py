"""
Shared API views
"""
from django.db import connection
from django.http import JsonResponse


def health_check(request):
    """
    Health check endpoint

    Returns:
        - 200: database reachable
        - 503: database connection failed
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")

        return JsonResponse({
            "status": "healthy",
            "service": "sems-api",
            "database": "connected",
        }, status=200)
    except Exception as e:
        return JsonResponse({
            "status": "unhealthy",
            "service": "sems-api",
            "database": "disconnected",
            "error": str(e),
        }, status=503)
