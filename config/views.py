from django.db import connection, DatabaseError
from django.http import JsonResponse

from apps.payments import payment_gateway_health


def health_check(request):
    """Report database reachability and payment gateway configuration."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        database = 'ok'
    except DatabaseError:
        database = 'unavailable'

    payments = payment_gateway_health()
    healthy = database == 'ok'

    return JsonResponse({
        'status': 'ok' if healthy else 'degraded',
        'database': database,
        'payments': payments,
    }, status=200 if healthy else 503)


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
