def _timestamp(value):
    return value.isoformat() if value else None


def format_campaign_transaction(transaction):
    return {
        "id": transaction.id,
        "name": transaction.user.name,
        "amount": transaction.amount,
        "created_at": _timestamp(transaction.created_at),
    }


def format_campaign_transactions(transactions):
    return [format_campaign_transaction(transaction) for transaction in transactions]


def format_user_transaction(transaction):
    image = transaction.campaign.primary_image
    return {
        "id": transaction.id,
        "amount": transaction.amount,
        "status": transaction.status,
        "created_at": _timestamp(transaction.created_at),
        "campaign": {
            "name": transaction.campaign.name,
            "image_url": image.file_name if image else "",
        },
    }


def format_user_transactions(transactions):
    return [format_user_transaction(transaction) for transaction in transactions]


def format_transaction(transaction):
    return {
        "id": transaction.id,
        "campaign_id": transaction.campaign_id,
        "user_id": transaction.user_id,
        "amount": transaction.amount,
        "status": transaction.status,
        "code": transaction.code,
        "payment_url": transaction.payment_url,
    }
