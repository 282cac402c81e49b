"""
Health probes for load balancers and orchestrators.
"""
import logging
from typing import Callable, Dict

from django.core.cache import cache
from django.db import connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)

CACHE_PROBE_KEY = 'health:probe'


def database_reachable() -> None:
    with connection.cursor() as cursor:
        cursor.execute('SELECT 1')


def cache_round_trip() -> None:
    cache.set(CACHE_PROBE_KEY, 'ok', 10)
    if cache.get(CACHE_PROBE_KEY) != 'ok':
        raise RuntimeError('cache did not return the probe value')


READINESS_CHECKS: Dict[str, Callable[[], None]] = {
    'database': database_reachable,
    'cache': cache_round_trip,
}


def run_checks(checks: Dict[str, Callable[[], None]]) -> Dict[str, dict]:
    """Run every probe; a probe fails by raising."""
    results = {}
    for name, check in checks.items():
        try:
            check()
            results[name] = {'healthy': True}
        except Exception as e:
            logger.warning(f"Readiness check '{name}' failed: {e}")
            results[name] = {'healthy': False, 'error': str(e)}
    return results


class HealthCheckView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'healthy'})


class ReadinessCheckView(APIView):
    """Ready once the database and the cache answer."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        results = run_checks(READINESS_CHECKS)
        ready = all(result['healthy'] for result in results.values())
        return Response(
            {'status': 'ready' if ready else 'not_ready', 'checks': results},
            status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )


class LivenessCheckView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'alive'})
