"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from pricing.domain.errors import DomainError, ErrorCode
from pricing.handlers.serializers import (
    ApplyResultSerializer,
    EventPricingSerializer,
    OptimizeRequestSerializer,
    PriceUpdateRequestSerializer,
    PricingLogEntrySerializer,
    PricingModeRequestSerializer,
    PricingSuggestionSerializer,
)
from pricing.services.factory import get_pricing_service

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PRICE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PRICE_BAND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PRICING_MODE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SUGGESTION_EVENT_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PERSISTENCE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


class PricingView(APIView):
    """Base handler that maps domain errors to responses."""

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)


class PricingSuggestionView(PricingView):
    """Handler for GET /api/events/{event_id}/pricing/suggestion"""

    def get(self, request: Request, event_id: str) -> Response:
        suggestion = get_pricing_service().get_suggestion(event_id)
        return Response(PricingSuggestionSerializer(suggestion).data)


class PricingOptimizeView(PricingView):
    """Handler for POST /api/events/{event_id}/pricing/optimize"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = OptimizeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = get_pricing_service().optimize(
            event_id, auto_apply=serializer.validated_data["auto_apply"]
        )
        return Response(ApplyResultSerializer(result).data)


class PriceUpdateView(PricingView):
    """Handler for POST /api/events/{event_id}/pricing/price"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = PriceUpdateRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_pricing_service().manual_set_price(
            event_id,
            serializer.validated_data["new_price"],
            reason=serializer.validated_data.get("reason") or None,
        )
        return Response(EventPricingSerializer(event).data)


class PricingModeView(PricingView):
    """Handler for POST /api/events/{event_id}/pricing/mode"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = PricingModeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        event = get_pricing_service().set_pricing_mode(
            event_id,
            data["pricing_mode"],
            min_price=data.get("min_price"),
            max_price=data.get("max_price"),
            candidate_price=data.get("suggested_price"),
        )
        return Response(EventPricingSerializer(event).data)


class PricingHistoryView(PricingView):
    """Handler for GET /api/events/{event_id}/pricing/history"""

    def get(self, request: Request, event_id: str) -> Response:
        entries = get_pricing_service().get_pricing_history(event_id)
        return Response(PricingLogEntrySerializer(entries, many=True).data)
