from pydantic import BaseModel, Field

from travel_booking.flight.domain import FlightBookingRequest
from travel_booking.hotel.domain import HotelBookingRequest
from travel_booking.payment.domain import PaymentMethod, TransactionRequest
from travel_booking.shared.domain import Money

# 日付は dd-mm-yyyy 形式の文字列のまま扱う
DATE_PATTERN = r"^\d{2}-\d{2}-\d{4}$"
# 先頭の 0 を落とさないよう CVV は数字列のまま扱う
CVV_PATTERN = r"^\d{3,4}$"


class FlightSearchInput(BaseModel):
    """フライト検索条件の入力スキーマ"""

    origin_city: str = Field(..., min_length=1, examples=["Cairo"])
    depart_date: str = Field(..., pattern=DATE_PATTERN, examples=["25-01-2022"])
    destination_city: str = Field(..., min_length=1, examples=["Istanbul"])
    return_date: str = Field(..., pattern=DATE_PATTERN, examples=["10-02-2022"])
    adults: int = Field(..., ge=0)
    children: int = Field(default=0, ge=0, description="5〜16歳")
    infants: int = Field(default=0, ge=0)

    def to_request(self) -> FlightBookingRequest:
        return FlightBookingRequest(
            origin_city=self.origin_city,
            destination_city=self.destination_city,
            depart_date=self.depart_date,
            return_date=self.return_date,
            adults=self.adults,
            children=self.children,
            infants=self.infants,
        )


class HotelSearchInput(BaseModel):
    """宿泊検索条件の入力スキーマ"""

    country: str = Field(..., min_length=1, examples=["Turkey"])
    city: str = Field(..., min_length=1, examples=["Istanbul"])
    check_in: str = Field(..., pattern=DATE_PATTERN, examples=["29-01-2022"])
    check_out: str = Field(..., pattern=DATE_PATTERN, examples=["10-02-2022"])
    adults: int = Field(..., ge=0)
    children: int = Field(default=0, ge=0)
    rooms_needed: int = Field(default=1, ge=1)
    nights: int = Field(..., ge=1)

    def to_request(self) -> HotelBookingRequest:
        return HotelBookingRequest(
            country=self.country,
            city=self.city,
            check_in=self.check_in,
            check_out=self.check_out,
            adults=self.adults,
            children=self.children,
            rooms_needed=self.rooms_needed,
            nights=self.nights,
        )


# メニュー番号と決済手段名の対応
PAYMENT_MENU = {
    "1": PaymentMethod.PAYPAL.value,
    "2": PaymentMethod.STRIPE.value,
    "3": PaymentMethod.SQUARE.value,
}


class PaymentInput(BaseModel):
    """決済情報の入力スキーマ

    決済手段名はここでは検証しない（未対応の手段はファクトリで弾く）。
    """

    method: str
    cardholder_name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    card_id: str = Field(..., min_length=1)
    expiry: str = Field(..., min_length=1)
    cvv: str = Field(..., pattern=CVV_PATTERN)

    def to_transaction(self, amount: Money) -> TransactionRequest:
        return TransactionRequest(
            method=PAYMENT_MENU.get(self.method, self.method),
            cardholder_name=self.cardholder_name,
            address=self.address,
            card_id=self.card_id,
            expiry=self.expiry,
            cvv=self.cvv,
            amount=amount,
        )
