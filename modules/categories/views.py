"""
Categories module API views.
"""
from dataclasses import asdict

from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.products.categorizer import ProductCategorizer
from .services import CategoryService
from .serializers import (
    BrandInferenceSerializer,
    CategoryCreateSerializer,
    CategoryMergeResultSerializer,
    CategoryMergeSerializer,
    CategoryMoveSerializer,
    CategorySerializer,
    CategoryTreeSerializer,
    CategoryUpdateSerializer,
)


category_service = CategoryService()
categorizer = ProductCategorizer(category_service=category_service)


def _include_inactive(request) -> bool:
    return request.query_params.get('include_inactive', '').lower() in ('1', 'true', 'yes')


class AdminWriteMixin:
    """Reads are public, writes need an administrator."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]


@extend_schema(tags=['Categories'])
class CategoryListCreateView(AdminWriteMixin, APIView):
    """Category list and create endpoint."""

    @extend_schema(
        parameters=[
            OpenApiParameter(name='include_inactive', type=bool, required=False),
        ],
        responses={200: CategorySerializer(many=True)},
        summary="List categories",
    )
    def get(self, request):
        categories = category_service.list_categories(include_inactive=_include_inactive(request))
        serializer = CategorySerializer(categories, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=CategoryCreateSerializer,
        responses={201: CategorySerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        category = category_service.create_category(
            name=data['name'],
            parent_id=data.get('parent_id'),
            description=data.get('description'),
        )

        output = CategorySerializer(category)
        return Response(output.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Categories'])
class CategoryTreeView(APIView):
    """Category tree endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='include_inactive', type=bool, required=False),
        ],
        responses={200: CategoryTreeSerializer(many=True)},
        summary="Get main categories with their subcategories",
    )
    def get(self, request):
        tree = category_service.get_category_tree(include_inactive=_include_inactive(request))
        return Response(CategoryTreeSerializer(tree, many=True).data)


@extend_schema(tags=['Categories'])
class CategoryDetailView(AdminWriteMixin, APIView):
    """Category detail endpoint."""

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Get category detail",
    )
    def get(self, request, category_id: int):
        category = category_service.get_category(category_id)
        category.product_count = category_service.product_count(category_id)
        return Response(CategorySerializer(category).data)

    @extend_schema(
        request=CategoryUpdateSerializer,
        responses={200: CategorySerializer},
        summary="Update a category",
    )
    def put(self, request, category_id: int):
        serializer = CategoryUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        category = category_service.update_category(category_id, **serializer.validated_data)
        return Response(CategorySerializer(category).data)

    patch = put

    @extend_schema(
        responses={204: None},
        summary="Delete a category without products or subcategories",
    )
    def delete(self, request, category_id: int):
        category_service.delete_category(category_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Categories'])
class CategorySubcategoriesView(APIView):
    """Subcategories of a main category."""
    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='include_inactive', type=bool, required=False),
        ],
        responses={200: CategorySerializer(many=True)},
        summary="List subcategories",
    )
    def get(self, request, category_id: int):
        children = category_service.get_subcategories(
            category_id,
            include_inactive=_include_inactive(request),
        )
        return Response(CategorySerializer(children, many=True).data)


@extend_schema(tags=['Categories'])
class CategoryMoveView(APIView):
    """Reparent a category."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=CategoryMoveSerializer,
        responses={200: CategorySerializer},
        summary="Move a category under another main category",
    )
    def post(self, request, category_id: int):
        serializer = CategoryMoveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = category_service.move_category(category_id, serializer.validated_data['parent_id'])
        return Response(CategorySerializer(category).data)


@extend_schema(tags=['Categories'])
class CategoryMergeView(APIView):
    """Merge a duplicate category into another one."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=CategoryMergeSerializer,
        responses={200: CategoryMergeResultSerializer},
        summary="Merge this category into target_id",
    )
    def post(self, request, category_id: int):
        serializer = CategoryMergeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = category_service.merge_categories(category_id, serializer.validated_data['target_id'])
        return Response(CategoryMergeResultSerializer(asdict(result)).data)


@extend_schema(tags=['Categories'])
class BrandInferenceView(APIView):
    """Suggest a brand subcategory for a model name."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=BrandInferenceSerializer,
        responses={200: CategorySerializer},
        summary="Find or create the brand subcategory for a model name",
    )
    def post(self, request):
        serializer = BrandInferenceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        category = categorizer.infer_brand_subcategory(data['model'], data['main_category_id'])
        return Response(CategorySerializer(category).data)
