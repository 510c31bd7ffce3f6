from rest_framework import serializers

from orders.models import Order, OrderStatus


class OrderSerializer(serializers.ModelSerializer):
    customer_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Order
        fields = ["id", "customer_id", "product_ids", "total_amount", "status", "created_at", "updated_at"]
        read_only_fields = ["id", "product_ids", "total_amount", "status", "created_at", "updated_at"]


class OrderCreateSerializer(serializers.Serializer):
    customer_id = serializers.IntegerField(min_value=1)
    product_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        allow_empty=False,
    )


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)


class OrderFilterSerializer(serializers.Serializer):
    customer_id = serializers.IntegerField(min_value=1, required=False)
    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)


class RevenueRecordSerializer(serializers.Serializer):
    customer_id = serializers.IntegerField()
    year = serializers.IntegerField()
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
