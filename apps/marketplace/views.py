from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .models import Listing
from .serializers import (
    ListingFilterSerializer,
    ListingWriteSerializer,
    ListingSerializer,
    ListingListSerializer,
)
from .services import (
    create_listing,
    update_listing,
    delete_listing,
    list_active_listings,
    list_listings_for_owner,
    # Exceptions
    ListingNotFoundError,
    ListingNotEditableError,
    NotListingOwnerError,
    InvalidPaymentOptionsError,
)


class ListingPagination(PageNumberPagination):
    """Custom pagination for listings."""
    page_size = 24
    page_size_query_param = 'page_size'
    max_page_size = 100


class ListingViewSet(viewsets.ModelViewSet):
    """
    ViewSet for marketplace listings.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Browse active listings
    create: Post a new listing
    retrieve: Get a listing (active or sold)
    partial_update: Edit your own active listing
    destroy: Delete your own active listing
    mine: Your listings, active and sold
    """

    queryset = Listing.objects.select_related('owner')
    serializer_class = ListingSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = ListingPagination
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_queryset(self):
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = ListingFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_active_listings(**filter_serializer.validated_data)

    def get_serializer_class(self):
        if self.action in ['list', 'mine']:
            return ListingListSerializer
        if self.action in ['create', 'partial_update']:
            return ListingWriteSerializer
        return ListingSerializer

    def get_permissions(self):
        if self.action == 'mine':
            return [IsAuthenticated()]
        return super().get_permissions()

    def create(self, request, *args, **kwargs):
        """Post a new listing as the current student."""
        serializer = ListingWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            listing = create_listing(owner=request.user, **serializer.validated_data)
        except InvalidPaymentOptionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ListingSerializer(listing).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):
        """Edit an active listing (owner only)."""
        serializer = ListingWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            listing = update_listing(
                listing_id=self.kwargs['pk'],
                user=request.user,
                **serializer.validated_data
            )
        except ListingNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotListingOwnerError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (ListingNotEditableError, InvalidPaymentOptionsError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ListingSerializer(listing).data)

    def destroy(self, request, *args, **kwargs):
        """Delete an active listing (owner only)."""
        try:
            delete_listing(listing_id=self.kwargs['pk'], user=request.user)
        except ListingNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotListingOwnerError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except ListingNotEditableError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: ListingListSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """
        Get the current student's listings.

        GET /api/marketplace/listings/mine/
        """
        listings = list_listings_for_owner(owner=request.user)
        page = self.paginate_queryset(listings)
        if page is not None:
            serializer = ListingListSerializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        return Response(ListingListSerializer(listings, many=True).data)
