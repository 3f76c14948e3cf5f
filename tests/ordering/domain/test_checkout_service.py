"""Checkout Service tests with stub collaborators injected at construction."""

import pytest
from ordering.checkout.models import CheckoutResult, Item
from shared.errors import InvalidCheckout, InvalidToken, ProductNotFound

CARD = {"number": "1234123412341234", "name": "Anderson", "expiry": "12/30", "cvv": "123"}


class TestTokenVerification:
    @pytest.mark.parametrize("token", [None, "", "wrong-token"])
    def test_invalid_token_is_rejected(self, checkout_service, gateway, token):
        with pytest.raises(InvalidToken) as exc:
            checkout_service.checkout(
                token=token,
                items=[Item(product_id=0, quantity=0)],
                freight=0,
                payment_method="boleto",
                card_data=CARD,
            )
        assert exc.value.message == "Token inválido"
        assert gateway.calls == []

    def test_token_checked_before_catalog(self, checkout_service, verifier):
        with pytest.raises(InvalidToken):
            checkout_service.checkout(
                token="wrong-token",
                items=[Item(product_id=999, quantity=1)],
                freight=0,
                payment_method="boleto",
            )
        assert verifier.seen == ["wrong-token"]


class TestItemResolution:
    def test_unknown_product_fails(self, checkout_service):
        with pytest.raises(ProductNotFound) as exc:
            checkout_service.checkout(
                token="token-falso",
                items=[Item(product_id=0, quantity=2)],
                freight=10,
                payment_method="boleto",
                card_data=CARD,
            )
        assert exc.value.message == "Produto não encontrado"
        assert exc.value.product_id == 0

    def test_unknown_product_fails_even_with_valid_items(self, checkout_service, gateway):
        with pytest.raises(ProductNotFound) as exc:
            checkout_service.checkout(
                token="token-falso",
                items=[Item(product_id=1, quantity=1), Item(product_id=42, quantity=1), Item(product_id=99, quantity=1)],
                freight=10,
                payment_method="credit_card",
                card_data=CARD,
            )
        assert exc.value.product_id == 42
        assert gateway.calls == []


class TestPricing:
    def test_total_is_items_plus_freight(self, checkout_service):
        result = checkout_service.checkout(
            token="token-falso",
            items=[Item(product_id=1, quantity=2), Item(product_id=2, quantity=1)],
            freight=10,
            payment_method="boleto",
        )
        assert result.total == 410.0

    def test_total_is_rounded_to_cents(self, checkout_service):
        result = checkout_service.checkout(
            token="token-falso",
            items=[Item(product_id=3, quantity=3)],
            freight=0.1,
            payment_method="boleto",
        )
        assert result.total == 60.07

    def test_price_without_checkout(self, checkout_service):
        assert checkout_service.price([Item(product_id=1, quantity=1)], freight=5) == 105.0

    def test_freight_only_when_no_items(self, checkout_service):
        result = checkout_service.checkout(
            token="token-falso",
            items=[],
            freight=15,
            payment_method="boleto",
        )
        assert result.total == 15.0


class TestResult:
    def test_result_echoes_request(self, checkout_service):
        items = [Item(product_id=1, quantity=2)]
        result = checkout_service.checkout(
            token="token-falso",
            items=items,
            freight=10,
            payment_method="boleto",
            card_data=CARD,
        )
        assert result == CheckoutResult(
            user_id="teste@teste.com",
            items=items,
            freight=10,
            payment_method="boleto",
            total=210.0,
        )

    def test_any_payment_method_string_is_accepted(self, checkout_service):
        result = checkout_service.checkout(
            token="token-falso",
            items=[Item(product_id=1, quantity=1)],
            freight=0,
            payment_method="vale-presente",
        )
        assert result.payment_method == "vale-presente"


class TestPaymentBranching:
    def test_card_payment_forwards_last4(self, checkout_service, gateway):
        checkout_service.checkout(
            token="token-falso",
            items=[Item(product_id=1, quantity=2)],
            freight=10,
            payment_method="credit_card",
            card_data=CARD,
        )
        assert len(gateway.calls) == 1
        call = gateway.calls[0]
        assert call["amount"] == 210.0
        assert call["payment_method"] == "credit_card"
        assert call["last4"] == "1234"
        assert call["reference"].startswith("chk-")

    def test_boleto_does_not_forward_card_data(self, checkout_service, gateway):
        checkout_service.checkout(
            token="token-falso",
            items=[Item(product_id=1, quantity=2)],
            freight=10,
            payment_method="boleto",
            card_data=CARD,
        )
        assert gateway.calls[0]["last4"] is None

    def test_card_payment_without_card_data(self, checkout_service, gateway):
        result = checkout_service.checkout(
            token="token-falso",
            items=[Item(product_id=1, quantity=1)],
            freight=0,
            payment_method="credit_card",
        )
        assert result.total == 100.0
        assert gateway.calls[0]["last4"] is None

    def test_card_data_does_not_change_result(self, checkout_service):
        kwargs = dict(token="token-falso", items=[Item(product_id=1, quantity=1)], freight=0, payment_method="credit_card")
        with_card = checkout_service.checkout(card_data=CARD, **kwargs)
        without_card = checkout_service.checkout(card_data=None, **kwargs)
        assert with_card == without_card


class TestRejectsNonPositiveTotals:
    @pytest.mark.parametrize(
        "items, freight",
        [
            ([Item(product_id=1, quantity=-1)], 0),
            ([Item(product_id=1, quantity=2), Item(product_id=2, quantity=-1)], 0),
            ([Item(product_id=1, quantity=1)], -500),
            ([Item(product_id=1, quantity=1)], float("nan")),
        ],
        ids=["negative_quantity", "mixed_sign_basket", "negative_freight", "nan_freight"],
    )
    def test_checkout_is_rejected(self, checkout_service, gateway, items, freight):
        with pytest.raises(InvalidCheckout) as exc:
            checkout_service.checkout(
                token="token-falso",
                items=items,
                freight=freight,
                payment_method="credit_card",
                card_data=CARD,
            )
        assert exc.value.status_code == 400
        assert gateway.calls == []

    def test_negative_quantity_checked_before_catalog(self, checkout_service):
        with pytest.raises(InvalidCheckout):
            checkout_service.price([Item(product_id=999, quantity=-1)], freight=0)

    def test_zero_quantity_and_freight_are_allowed(self, checkout_service):
        assert checkout_service.price([Item(product_id=1, quantity=0)], freight=0) == 0.0

    def test_any_positive_quantity_gives_positive_total(self, checkout_service):
        result = checkout_service.checkout(
            token="token-falso",
            items=[Item(product_id=1, quantity=0), Item(product_id=3, quantity=1)],
            freight=0,
            payment_method="pix",
        )
        assert result.total > 0
