from sqlalchemy.orm import joinedload

from backerhub.models import Campaign, CampaignImage


class CampaignRepository:
    def __init__(self, session):
        self.session = session

    def find_all(self):
        return (self.session.query(Campaign)
                .options(joinedload(Campaign.images))
                .order_by(Campaign.id)
                .all())

    def find_by_user_id(self, user_id):
        return (self.session.query(Campaign)
                .options(joinedload(Campaign.images))
                .filter_by(user_id=user_id)
                .order_by(Campaign.id)
                .all())

    def find_by_id(self, campaign_id):
        return (self.session.query(Campaign)
                .options(joinedload(Campaign.user), joinedload(Campaign.images))
                .filter_by(id=campaign_id)
                .first())

    def find_for_update(self, campaign_id):
        """Loads the campaign row locked until the current DB transaction ends."""
        return (self.session.query(Campaign)
                .filter_by(id=campaign_id)
                .with_for_update()
                .populate_existing()
                .first())

    def save(self, campaign):
        self.session.add(campaign)
        self.session.commit()
        return campaign

    def update(self, campaign):
        self.session.commit()
        return campaign

    def create_image(self, campaign_image):
        self.session.add(campaign_image)
        self.session.commit()
        return campaign_image

    def mark_all_images_as_non_primary(self, campaign_id):
        (self.session.query(CampaignImage)
         .filter_by(campaign_id=campaign_id)
         .update({CampaignImage.is_primary: False}, synchronize_session='fetch'))
