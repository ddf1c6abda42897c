"""
Health check views.
"""
import logging

from django.db import DatabaseError, connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.categories.models import CategoryModel

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe: database reachable and catalog tables migrated."""
    permission_classes = [AllowAny]

    def get(self, request):
        checks = {
            'database': self._check_database(),
            'catalog': self._check_catalog(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        status_code = status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
            },
            status=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except DatabaseError as e:
            logger.warning(f"Readiness database check failed: {e}")
            return {'healthy': False, 'error': str(e)}

    def _check_catalog(self):
        try:
            return {'healthy': True, 'categories': CategoryModel.objects.count()}
        except DatabaseError as e:
            logger.warning(f"Readiness catalog check failed: {e}")
            return {'healthy': False, 'error': str(e)}
