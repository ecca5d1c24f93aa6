import django_filters

from modules.customers.models import Customer


class CustomerFilter(django_filters.FilterSet):
    fullName = django_filters.CharFilter(field_name="full_name", lookup_expr="icontains")
    phoneNumber = django_filters.CharFilter(field_name="phone_number", lookup_expr="exact")
    createdAt = django_filters.DateFilter(field_name="created_at", lookup_expr="date")

    class Meta:
        model = Customer
        fields = ["fullName", "phoneNumber", "createdAt"]
