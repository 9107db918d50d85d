"""Serializers between stored records and domain models.

Input serializers validate raw records (camelCase keys, as the data-access
layer stores them) and build domain models. Domain errors raised while
building are reported as validation errors carrying the specific reason.
Output serializers turn calculator results into API-ready dicts.
"""

from decimal import Decimal

from rest_framework import serializers

from bookkeeping.conf import get_settings
from bookkeeping.domain import (
    DomainError,
    FlexiblePricing,
    InstructorAssignment,
    InvalidInputError,
    LegacyPricing,
    LegacyRegistrationCounts,
    PricingOption,
    Program,
    Registration,
    RegistrationEntry,
    Season,
    SessionHours,
    SplitPercent,
    VenuePayment,
    WorkDays,
)


class DomainModelSerializer(serializers.Serializer):
    """Serializer whose ``save()`` returns a domain model instead of a row."""

    def build(self, attrs: dict):
        raise NotImplementedError

    def validate(self, attrs: dict) -> dict:
        try:
            self.build(attrs)
        except DomainError as exc:
            raise serializers.ValidationError(str(exc), code=exc.code.value) from exc
        return attrs

    def create(self, validated_data: dict):
        return self.build(validated_data)

    def update(self, instance, validated_data: dict):
        raise NotImplementedError("Domain models are immutable")


class PricingOptionSerializer(DomainModelSerializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.IntegerField(min_value=0)
    order = serializers.IntegerField(default=0)
    isActive = serializers.BooleanField(source="is_active", default=True)

    def build(self, attrs: dict) -> PricingOption:
        return PricingOption(
            id=attrs["id"],
            name=attrs["name"],
            price=attrs["price"],
            order=attrs.get("order", 0),
            is_active=attrs.get("is_active", True),
        )


class ProgramSerializer(DomainModelSerializer):
    """Program with either flexible ``pricingOptions`` or legacy price fields."""

    id = serializers.CharField()
    name = serializers.CharField()
    venueSplitPercent = serializers.DecimalField(
        source="venue_split_percent",
        max_digits=5,
        decimal_places=2,
        min_value=Decimal(0),
        max_value=Decimal(100),
    )
    isMonthly = serializers.BooleanField(source="is_monthly")
    sessionDuration = serializers.DecimalField(
        source="session_duration",
        max_digits=5,
        decimal_places=2,
        required=False,
        allow_null=True,
    )
    programTypeSessionHours = serializers.DecimalField(
        source="program_type_session_hours",
        max_digits=5,
        decimal_places=2,
        required=False,
        allow_null=True,
    )
    pricingOptions = PricingOptionSerializer(source="pricing_options", many=True, required=False)
    fullPrice = serializers.IntegerField(source="full_price", min_value=0, required=False, allow_null=True)
    halfPrice = serializers.IntegerField(source="half_price", min_value=0, required=False, allow_null=True)
    subscriptionPrice = serializers.IntegerField(
        source="subscription_price", min_value=0, required=False, allow_null=True
    )

    def build(self, attrs: dict) -> Program:
        options = attrs.get("pricing_options") or []
        if options:
            option_serializer = PricingOptionSerializer()
            pricing = FlexiblePricing(
                options=tuple(option_serializer.build(option) for option in options)
            )
        elif attrs.get("full_price") is not None:
            pricing = LegacyPricing(
                full_price=attrs["full_price"],
                half_price=attrs.get("half_price"),
                subscription_price=attrs.get("subscription_price"),
            )
        else:
            raise InvalidInputError("pricing", "needs pricingOptions or fullPrice")

        # Program duration first, then the program type's, then the configured default.
        duration = attrs.get("session_duration") or attrs.get("program_type_session_hours")
        return Program(
            id=attrs["id"],
            name=attrs["name"],
            venue_split_percent=SplitPercent.of(attrs["venue_split_percent"]),
            is_monthly=attrs["is_monthly"],
            session_duration=(
                SessionHours.of(duration)
                if duration
                else get_settings().default_session_hours
            ),
            pricing=pricing,
        )


class RegistrationEntrySerializer(serializers.Serializer):
    pricingOptionId = serializers.CharField(source="pricing_option_id")
    quantity = serializers.IntegerField(min_value=0)


class RegistrationSerializer(DomainModelSerializer):
    """Registration with flexible ``entries`` or legacy registration counts."""

    id = serializers.CharField()
    programId = serializers.CharField(source="program_id")
    month = serializers.IntegerField(min_value=1, max_value=12, required=False, allow_null=True)
    seasonId = serializers.CharField(source="season_id", required=False, allow_null=True)
    entries = RegistrationEntrySerializer(many=True, required=False)
    fullRegistrations = serializers.IntegerField(source="full", min_value=0, required=False)
    halfRegistrations = serializers.IntegerField(source="half", min_value=0, required=False)
    subscriptionRegistrations = serializers.IntegerField(
        source="subscription", min_value=0, required=False
    )

    def build(self, attrs: dict) -> Registration:
        if "entries" in attrs:
            counts = tuple(
                RegistrationEntry(entry["pricing_option_id"], entry["quantity"])
                for entry in attrs["entries"]
            )
        else:
            counts = LegacyRegistrationCounts(
                full=attrs.get("full", 0),
                half=attrs.get("half", 0),
                subscription=attrs.get("subscription", 0),
            )
        return Registration(
            id=attrs["id"],
            program_id=attrs["program_id"],
            counts=counts,
            month=attrs.get("month"),
            season_id=attrs.get("season_id"),
        )


class InstructorAssignmentSerializer(DomainModelSerializer):
    hourlyWage = serializers.IntegerField(source="hourly_wage", min_value=0)
    workDays = serializers.ListField(source="work_days", child=serializers.CharField())
    instructorId = serializers.CharField(source="instructor_id", required=False, default="")
    instructorName = serializers.CharField(source="instructor_name", required=False, default="")
    seasonId = serializers.CharField(source="season_id", required=False, allow_null=True)

    def validate_workDays(self, value: list[str]) -> list[str]:
        try:
            WorkDays.from_names(value)
        except InvalidInputError as exc:
            raise serializers.ValidationError(exc.message, code=exc.code.value) from exc
        return value

    def build(self, attrs: dict) -> InstructorAssignment:
        return InstructorAssignment(
            hourly_wage=attrs["hourly_wage"],
            work_days=WorkDays.from_names(attrs["work_days"]),
            instructor_id=attrs.get("instructor_id", ""),
            instructor_name=attrs.get("instructor_name", ""),
            season_id=attrs.get("season_id"),
        )


class SeasonSerializer(DomainModelSerializer):
    id = serializers.CharField()
    name = serializers.CharField()
    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")

    def build(self, attrs: dict) -> Season:
        return Season(
            id=attrs["id"],
            name=attrs["name"],
            start_date=attrs["start_date"],
            end_date=attrs["end_date"],
        )


class VenuePaymentSerializer(DomainModelSerializer):
    id = serializers.CharField()
    amount = serializers.IntegerField(min_value=1)
    paidDate = serializers.DateField(source="paid_date")
    month = serializers.IntegerField(min_value=1, max_value=12, required=False, allow_null=True)
    seasonId = serializers.CharField(source="season_id", required=False, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def build(self, attrs: dict) -> VenuePayment:
        return VenuePayment(
            id=attrs["id"],
            amount=attrs["amount"],
            paid_date=attrs["paid_date"],
            month=attrs.get("month"),
            season_id=attrs.get("season_id"),
            description=attrs.get("description") or "",
        )


class FinancialSummarySerializer(serializers.Serializer):
    """Serializer for FinancialSummary results."""

    revenue = serializers.IntegerField()
    venueCosts = serializers.IntegerField(source="venue_costs")
    instructorWages = serializers.IntegerField(source="instructor_wages")
    netProfit = serializers.IntegerField(source="net_profit")
    marginPercent = serializers.FloatField(source="margin_percent")


class LineItemSerializer(serializers.Serializer):
    label = serializers.CharField()
    quantity = serializers.IntegerField()
    unitPrice = serializers.IntegerField(source="unit_price")
    subtotal = serializers.IntegerField()


class ProgramBreakdownSerializer(serializers.Serializer):
    programId = serializers.CharField(source="program_id")
    programName = serializers.CharField(source="program_name")
    revenue = serializers.IntegerField()
    venueCosts = serializers.IntegerField(source="venue_costs")
    instructorWages = serializers.IntegerField(source="instructor_wages")
    netProfit = serializers.IntegerField(source="net_profit")
    share = serializers.DecimalField(max_digits=5, decimal_places=4)
    lineItems = LineItemSerializer(source="line_items", many=True)


class ProgramErrorSerializer(serializers.Serializer):
    programId = serializers.CharField(source="program_id")
    programName = serializers.CharField(source="program_name")
    code = serializers.CharField(source="error.code.value")
    message = serializers.CharField(source="error.message")


class MonthlyRollupSerializer(serializers.Serializer):
    """Serializer for MonthlyRollup results; currency comes from settings."""

    total = FinancialSummarySerializer()
    perProgram = ProgramBreakdownSerializer(source="per_program", many=True)
    errors = ProgramErrorSerializer(many=True)
    currency = serializers.SerializerMethodField()

    def get_currency(self, obj) -> str:
        return self.context.get("currency") or get_settings().currency


class InstructorPayLineSerializer(serializers.Serializer):
    instructorId = serializers.CharField(source="instructor_id")
    instructorName = serializers.CharField(source="instructor_name")
    programId = serializers.CharField(source="program_id")
    sessions = serializers.DecimalField(max_digits=8, decimal_places=2)
    hours = serializers.DecimalField(max_digits=8, decimal_places=2)
    baseWage = serializers.IntegerField(source="base_wage")
    loadedWage = serializers.IntegerField(source="loaded_wage")


class VenueBalanceSerializer(serializers.Serializer):
    owed = serializers.IntegerField()
    paid = serializers.IntegerField()
    outstanding = serializers.IntegerField()
