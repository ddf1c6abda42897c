"""
Products module API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import ProductService
from .serializers import (
    ProductCategorySerializer,
    ProductCreateSerializer,
    ProductListQuerySerializer,
    ProductListSerializer,
    ProductSerializer,
)


product_service = ProductService()


@extend_schema(tags=['Products'])
class ProductListCreateView(APIView):
    """Product list and create endpoint."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]

    @extend_schema(
        parameters=[ProductListQuerySerializer],
        responses={200: ProductListSerializer(many=True)},
        summary="List products",
    )
    def get(self, request):
        query = ProductListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        products = product_service.get_all_products(
            category_id=query.validated_data.get('category_id'),
            offset=query.validated_data['offset'],
            limit=query.validated_data['limit'],
        )

        serializer = ProductListSerializer(products, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
        summary="Create a product",
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = product_service.create_product(**serializer.validated_data)

        output = ProductSerializer(product)
        return Response(output.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Products'])
class ProductDetailView(APIView):
    """Product detail endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductSerializer},
        summary="Get product detail",
    )
    def get(self, request, product_id: int):
        product = product_service.get_product(product_id)
        return Response(ProductSerializer(product).data)


@extend_schema(tags=['Products'])
class ProductCategoryView(APIView):
    """Manual category override for a product."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=ProductCategorySerializer,
        responses={200: ProductSerializer},
        summary="Move a product to another category",
    )
    def put(self, request, product_id: int):
        serializer = ProductCategorySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = product_service.set_category(product_id, serializer.validated_data['category_id'])
        return Response(ProductSerializer(product).data)
