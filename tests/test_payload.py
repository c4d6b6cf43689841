from frontend.services.payload import build_split_payload, clean_rows


def test_clean_rows_drops_blank_names_and_fills_numbers():
    rows = [
        {"name": " Pizza ", "price": 20.0, "is_shared": True},
        {"name": "", "price": 3.0, "is_shared": False},
        {"name": None, "price": None, "is_shared": None},
        {"name": "Soda", "price": float("nan"), "is_shared": None},
    ]

    assert clean_rows(rows, "price") == [
        {"name": "Pizza", "price": 20.0, "is_shared": True},
        {"name": "Soda", "price": 0.0, "is_shared": False},
    ]


def test_build_split_payload():
    items = [
        {"name": "Pizza", "price": 20.0, "is_shared": True},
        {"name": "Soda", "price": 5.0, "is_shared": False},
        {"name": "Cake", "price": 6.5, "is_shared": False},
    ]
    diners = [{"name": "Alice", "tip_percentage": 10.0}]

    payload = build_split_payload(12.5, items, diners, {0: "Alice", 1: "Alice"})

    assert payload == {
        "service_charge_percentage": "12.5",
        "items": [
            {"name": "Pizza", "price": "20.0", "is_shared": True, "assigned_to": None},
            {"name": "Soda", "price": "5.0", "is_shared": False, "assigned_to": "Alice"},
            {"name": "Cake", "price": "6.5", "is_shared": False, "assigned_to": None},
        ],
        "diners": [{"name": "Alice", "tip_percentage": "10.0"}],
    }
