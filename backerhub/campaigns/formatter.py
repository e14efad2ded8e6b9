def _image_url(campaign):
    image = campaign.primary_image
    return image.file_name if image else ""


def format_campaign(campaign):
    return {
        "id": campaign.id,
        "user_id": campaign.user_id,
        "name": campaign.name,
        "short_description": campaign.short_description,
        "image_url": _image_url(campaign),
        "goal_amount": campaign.goal_amount,
        "current_amount": campaign.current_amount,
        "backer_count": campaign.backer_count,
        "slug": campaign.slug,
    }


def format_campaigns(campaigns):
    return [format_campaign(campaign) for campaign in campaigns]


def format_campaign_detail(campaign):
    detail = format_campaign(campaign)
    detail.update({
        "description": campaign.description,
        "perks": campaign.perk_list,
        "user": {
            "name": campaign.user.name,
            "image_url": campaign.user.avatar_file_name,
        },
        "images": [
            {"image_url": image.file_name, "is_primary": image.is_primary}
            for image in campaign.images
        ],
    })
    return detail
