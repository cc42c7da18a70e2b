from django.urls import path
from .views import (
    ActivityCreateView,
    ActivityToDoView,
    AlbumsView,
    AnnouncementView,
    CalculateTrazosView,
    MemberActivitiesView,
    MemberDetailView,
    NewsView,
    RankingView,
    RegisterView,
    UpdateRankView,
    UpdateRoleView,
)

urlpatterns = [
    path("register", RegisterView.as_view(), name="register"),
    path("members/<int:member_id>", MemberDetailView.as_view(), name="member-detail"),
    path("members/<int:member_id>/activities", MemberActivitiesView.as_view(), name="member-activities"),
    path("activities", ActivityCreateView.as_view(), name="activity-create"),
    path("calculate-trazos", CalculateTrazosView.as_view(), name="calculate-trazos"),
    path("rankings/<str:metric>", RankingView.as_view(), name="ranking"),
    path("news", NewsView.as_view(), name="news"),
    path("announcements", AnnouncementView.as_view(), name="announcements"),
    path("activities-to-do", ActivityToDoView.as_view(), name="activities-to-do"),
    path("albums/<str:arista>", AlbumsView.as_view(), name="albums"),
    path("admin/update-rank", UpdateRankView.as_view(), name="admin-update-rank"),
    path("admin/update-role", UpdateRoleView.as_view(), name="admin-update-role"),
]
