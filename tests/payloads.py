"""Sample Connect response bodies."""

ACCOUNT = {
    "_id": "QPO8Jo8vdDHMepg41PBwckXm4KdK1yUdmXOwK",
    "_item": "KdDjmojBERUKx3JkDd9RuxA5EvejA4SENO4AA",
    "_user": "eJXpMzpR65FP4RYno6rzuA7OZjd9n3Hna0RYa",
    "balance": {"available": 1203.42, "current": 1274.93},
    "institution_type": "fake_institution",
    "meta": {"name": "Plaid Savings", "number": "9606"},
    "type": "depository",
    "subtype": "savings",
}
TRANSACTION = {
    "_account": "XARE85EJqKsjxLp6XR8ocg8VakrkXpTXmRdOo",
    "_id": "0AZ0De04KqsreDgVwM1RSRYjyd8yXxSDQ8Zxn",
    "amount": 200,
    "date": "2014-07-21",
    "name": "ATM Withdrawal",
    "meta": {"location": {"city": "San Francisco", "state": "CA"}},
    "pending": False,
    "type": {"primary": "special"},
    "category": ["Transfer", "Withdrawal", "ATM"],
    "category_id": "21012002",
    "score": {"location": {"city": 1, "state": 1}, "name": 1},
}
CONNECT_BODY = {"accounts": [ACCOUNT], "access_token": "test_bofa", "transactions": [TRANSACTION]}
QUESTIONS_BODY = {
    "type": "questions",
    "mfa": [{"question": "You say tomato, I say...?"}],
    "access_token": "test_bofa",
}
DEVICE_BODY = {
    "type": "device",
    "mfa": {"message": "Code sent to xxx-xxx-5309"},
    "access_token": "test_chase",
}
LIST_BODY = {
    "type": "list",
    "mfa": [
        {"mask": "xxx-xxx-5309", "type": "phone"},
        {"mask": "t..t@plaid.com", "type": "email"},
    ],
    "access_token": "test_chase",
}
ERROR_BODY = {
    "code": 1200,
    "message": "invalid credentials",
    "resolve": "The username or password provided were not correct.",
    "access_token": "test_bofa",
}
