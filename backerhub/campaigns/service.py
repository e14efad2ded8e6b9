import logging
import re
import unicodedata
from uuid import uuid4

from backerhub.errors import Forbidden, NotFound
from backerhub.models import Campaign, CampaignImage

logger = logging.getLogger(__name__)


def slugify(value):
    ascii_value = (
        unicodedata.normalize("NFKD", str(value or "").lower())
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_value).strip("-")
    if not slug:
        slug = uuid4().hex
    return slug


class CampaignService:
    def __init__(self, repository):
        self.repository = repository

    def get_campaigns(self, user_id=None):
        if user_id:
            return self.repository.find_by_user_id(user_id)
        return self.repository.find_all()

    def get_campaign_by_id(self, campaign_id):
        campaign = self.repository.find_by_id(campaign_id)
        if campaign is None:
            raise NotFound("Campaign not found")
        return campaign

    def create_campaign(self, user_id, name, short_description, description, goal_amount, perks):
        campaign = Campaign(
            user_id=user_id,
            name=name,
            short_description=short_description,
            description=description,
            goal_amount=goal_amount,
            perks=perks,
            slug=slugify(f"{name} {user_id}"),
        )
        self.repository.save(campaign)
        logger.info(f"Created campaign {campaign.id} ({campaign.slug}) for user {user_id}")
        return campaign

    def get_owned_campaign(self, campaign_id, user_id):
        campaign = self.get_campaign_by_id(campaign_id)
        if campaign.user_id != user_id:
            logger.warning(f"User {user_id} is not the owner of campaign {campaign_id}")
            raise Forbidden("Not an owner of the campaign")
        return campaign

    def update_campaign(self, campaign_id, user_id, name, short_description, description, goal_amount, perks):
        campaign = self.get_owned_campaign(campaign_id, user_id)

        campaign.name = name
        campaign.short_description = short_description
        campaign.description = description
        campaign.goal_amount = goal_amount
        campaign.perks = perks
        return self.repository.update(campaign)

    def save_campaign_image(self, campaign_id, user_id, is_primary, file_location):
        self.get_owned_campaign(campaign_id, user_id)

        # only one primary image per campaign
        if is_primary:
            self.repository.mark_all_images_as_non_primary(campaign_id)

        image = CampaignImage(campaign_id=campaign_id, file_name=file_location, is_primary=bool(is_primary))
        return self.repository.create_image(image)
