# portal/views.py
from __future__ import annotations

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .catalog import albums_for
from .models import Activity, ActivityToDo, Announcement, Member, News
from .scoring import compute_trazos
from .serializers import (
    ActivityCreateSerializer,
    ActivitySerializer,
    ActivityToDoCreateSerializer,
    ActivityToDoSerializer,
    AnnouncementCreateSerializer,
    AnnouncementSerializer,
    MemberProfileUpdateSerializer,
    MemberRegisterSerializer,
    MemberSerializer,
    NewsCreateSerializer,
    NewsSerializer,
    RankingEntrySerializer,
    RankUpdateSerializer,
    RoleUpdateSerializer,
    TrazosPreviewSerializer,
)

ACTIVITY_HISTORY_LIMIT = 50


def _parse_limit(raw: str | None, default: int | None) -> int | None:
    """Parse an optional ?limit= query value (positive integer)."""
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError('limit must be an integer.')
    if value < 1:
        raise ValueError('limit must be >= 1.')
    return value


class RegisterView(APIView):
    """POST /api/register"""
    def post(self, request):
        ser = MemberRegisterSerializer(data=request.data or {})
        if not ser.is_valid():
            return Response(ser.errors, status=status.HTTP_400_BAD_REQUEST)
        member = services.register_member(**ser.validated_data)
        return Response(MemberSerializer(member).data, status=status.HTTP_201_CREATED)


class MemberDetailView(APIView):
    """
    GET   /api/members/{id}  profile with cumulative stats and rank
    PATCH /api/members/{id}  full_name, age, birthday, facebook_link only
    """
    def get(self, request, member_id: int):
        member = get_object_or_404(Member, pk=member_id)
        return Response(MemberSerializer(member).data)

    def patch(self, request, member_id: int):
        member = get_object_or_404(Member, pk=member_id)
        ser = MemberProfileUpdateSerializer(member, data=request.data or {}, partial=True)
        if not ser.is_valid():
            return Response(ser.errors, status=status.HTTP_400_BAD_REQUEST)
        ser.save()
        return Response(MemberSerializer(member).data)


class ActivityCreateView(APIView):
    """
    POST /api/activities
    The response is sent only after the owner's totals include the new activity.
    """
    def post(self, request):
        ser = ActivityCreateSerializer(data=request.data or {})
        if not ser.is_valid():
            return Response(ser.errors, status=status.HTTP_400_BAD_REQUEST)
        attrs = dict(ser.validated_data)
        member_id = attrs.pop('member_id')
        try:
            activity = services.create_activity(member_id, **attrs)
        except Member.DoesNotExist:
            return Response({'detail': 'Member not found.'}, status=status.HTTP_404_NOT_FOUND)
        return Response(ActivitySerializer(activity).data, status=status.HTTP_201_CREATED)


class MemberActivitiesView(APIView):
    """GET /api/members/{id}/activities?limit=50 (newest first)"""
    def get(self, request, member_id: int):
        member = get_object_or_404(Member, pk=member_id)
        try:
            limit = _parse_limit(request.query_params.get('limit'), ACTIVITY_HISTORY_LIMIT)
        except ValueError as e:
            return Response({'detail': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        qs = Activity.objects.filter(member=member).order_by('-created_at', '-id')[:limit]
        return Response(ActivitySerializer(qs, many=True).data)


class CalculateTrazosView(APIView):
    """POST /api/calculate-trazos  {type, words, responses?} -> {trazos}"""
    def post(self, request):
        ser = TrazosPreviewSerializer(data=request.data or {})
        if not ser.is_valid():
            return Response(ser.errors, status=status.HTTP_400_BAD_REQUEST)
        data = ser.validated_data
        trazos = compute_trazos(data['type'], data['words'], data.get('responses'))
        return Response({'trazos': trazos})


class RankingView(APIView):
    """GET /api/rankings/{trazos|words}?limit=20"""
    def get(self, request, metric: str):
        try:
            limit = _parse_limit(request.query_params.get('limit'), None)
            members = services.rank_members(metric, limit)
        except ValueError as e:
            return Response({'detail': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        rows = RankingEntrySerializer(members, many=True).data
        return Response([dict(row, position=i) for i, row in enumerate(rows, start=1)])


class _AuthoredContentView(APIView):
    """
    GET lists the newest items; POST creates one on behalf of an admin
    named by `author_id` in the body.
    """
    model = None
    create_serializer_class = None
    serializer_class = None
    list_limit = 10

    def get(self, request):
        qs = self.model.objects.select_related('author').order_by('-created_at', '-id')[: self.list_limit]
        return Response(self.serializer_class(qs, many=True).data)

    def post(self, request):
        ser = self.create_serializer_class(data=request.data or {})
        if not ser.is_valid():
            return Response(ser.errors, status=status.HTTP_400_BAD_REQUEST)
        attrs = dict(ser.validated_data)
        author = services.require_admin(attrs.pop('author_id'))
        obj = self.model.objects.create(author=author, **attrs)
        return Response(self.serializer_class(obj).data, status=status.HTTP_201_CREATED)


class NewsView(_AuthoredContentView):
    """GET/POST /api/news"""
    model = News
    create_serializer_class = NewsCreateSerializer
    serializer_class = NewsSerializer


class AnnouncementView(_AuthoredContentView):
    """GET/POST /api/announcements"""
    model = Announcement
    create_serializer_class = AnnouncementCreateSerializer
    serializer_class = AnnouncementSerializer


class ActivityToDoView(_AuthoredContentView):
    """GET/POST /api/activities-to-do"""
    model = ActivityToDo
    create_serializer_class = ActivityToDoCreateSerializer
    serializer_class = ActivityToDoSerializer
    list_limit = 20


class AlbumsView(APIView):
    """GET /api/albums/{arista}"""
    def get(self, request, arista: str):
        return Response(albums_for(arista))


class UpdateRankView(APIView):
    """POST /api/admin/update-rank  {admin_id, signature, rank}"""
    def post(self, request):
        ser = RankUpdateSerializer(data=request.data or {})
        if not ser.is_valid():
            return Response(ser.errors, status=status.HTTP_400_BAD_REQUEST)
        data = ser.validated_data
        admin = services.require_admin(data['admin_id'])
        member = services.set_rank(admin, data['signature'], data['rank'])
        return Response(MemberSerializer(member).data)


class UpdateRoleView(APIView):
    """POST /api/admin/update-role  {admin_id, signature, role}"""
    def post(self, request):
        ser = RoleUpdateSerializer(data=request.data or {})
        if not ser.is_valid():
            return Response(ser.errors, status=status.HTTP_400_BAD_REQUEST)
        data = ser.validated_data
        admin = services.require_admin(data['admin_id'])
        member = services.set_role(admin, data['signature'], data['role'])
        return Response(MemberSerializer(member).data)
