class TestTravelAgency:
    """TravelAgency の対話フローのテスト"""

    def test_sign_up_sign_in_and_exit(self, create_agency, scripts):
        # Arrange
        agency, terminal = create_agency(
            *scripts["sign_up"], *scripts["sign_in"], "1", "4", "3"
        )

        # Act
        agency.run()

        # Assert
        assert "Signed up successfully." in terminal.output
        assert "Hello mostafa | User View" in terminal.output
        assert "Name: mostafa" in terminal.transcript

    def test_duplicate_sign_up_is_rejected(self, create_agency, scripts):
        agency, terminal = create_agency(*scripts["sign_up"], "1", "mostafa", "3")

        agency.run()

        assert "Already used. Try again." in terminal.output

    def test_wrong_password(self, create_agency, scripts):
        agency, terminal = create_agency(
            *scripts["sign_up"], "2", "mostafa", "wrong", "3"
        )

        agency.run()

        assert "Error: Invalid user name or password." in terminal.output

    def test_save_pays_and_stores_itinerary(self, create_agency, scripts):
        """フライト 600 + ホテル 3000 を PayPal で支払い保存する"""

        # Arrange
        agency, terminal = create_agency(
            *scripts["sign_up"],
            *scripts["sign_in"],
            "2",
            *scripts["flight"],
            "1",
            *scripts["hotel"],
            "2",
            "3",
            *scripts["paypal"],
            "3",
            "4",
            "3",
        )

        # Act
        agency.run()

        # Assert
        assert "Total to pay: 3600 USD" in terminal.output
        assert "Itinerary saved." in terminal.output
        assert "Total Cost for All Itineraries: 3600 USD" in terminal.transcript

    def test_save_empty_itinerary(self, create_agency, scripts):
        agency, terminal = create_agency(
            *scripts["sign_up"], *scripts["sign_in"], "2", "3", "4", "3"
        )

        agency.run()

        assert "Empty Itinerary." in terminal.output

    def test_cancelled_payment_keeps_itinerary(self, create_agency, scripts):
        """決済を中止しても旅程は残り、再度保存できる"""

        # Arrange
        agency, terminal = create_agency(
            *scripts["sign_up"],
            *scripts["sign_in"],
            "2",
            *scripts["flight"],
            "1",
            "3",
            "E",
            "2",
            "3",
            *scripts["paypal"],
            "4",
            "3",
        )

        # Act
        agency.run()

        # Assert
        assert "Payment is not made !! (Try Again)" in terminal.output
        assert terminal.output.count("Total to pay: 600 USD") == 2
        assert "Itinerary saved." in terminal.output

    def test_unknown_payment_method_fails(self, create_agency, scripts):
        agency, terminal = create_agency(
            *scripts["sign_up"],
            *scripts["sign_in"],
            "2",
            *scripts["flight"],
            "1",
            "3",
            "9",
            "Mostafa",
            "Cairo",
            "4111-1111",
            "12-2026",
            "123",
            "4",
            "3",
        )

        agency.run()

        assert "Payment is not made !! (Try Again)" in terminal.output
        assert "Itinerary saved." not in terminal.output

    def test_logout_discards_working_itinerary(self, create_agency, scripts):
        # Arrange
        agency, terminal = create_agency(
            *scripts["sign_up"],
            *scripts["sign_in"],
            "2",
            *scripts["flight"],
            "1",
            "3",
            "e",
            "4",
            *scripts["sign_in"],
            "2",
            "3",
            "4",
            "3",
        )

        # Act
        agency.run()

        # Assert
        assert "Empty Itinerary." in terminal.output

    def test_aborted_selection_adds_nothing(self, create_agency, scripts):
        agency, terminal = create_agency(
            *scripts["sign_up"],
            *scripts["sign_in"],
            "2",
            *scripts["flight"],
            "-1",
            "3",
            "4",
            "3",
        )

        agency.run()

        assert "Empty Itinerary." in terminal.output

    def test_invalid_number_is_reported(self, create_agency, scripts):
        flight = list(scripts["flight"])
        flight[5] = "two"
        agency, terminal = create_agency(
            *scripts["sign_up"], *scripts["sign_in"], "2", *flight, "4", "4", "3"
        )

        agency.run()

        assert "Invalid input: adults" in terminal.output

    def test_cancel_during_flight_entry(self, create_agency, scripts):
        agency, terminal = create_agency(
            *scripts["sign_up"], *scripts["sign_in"], "2", "1", "Cairo", "e", "3",
            "4", "3",
        )

        agency.run()

        assert "Empty Itinerary." in terminal.output
