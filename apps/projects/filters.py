import django_filters

from .models import Project


class ProjectFilter(django_filters.FilterSet):
    featured = django_filters.BooleanFilter()
    type = django_filters.CharFilter(lookup_expr="iexact")

    class Meta:
        model = Project
        fields = ["featured", "type"]
