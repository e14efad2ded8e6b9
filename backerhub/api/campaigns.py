# backerhub/api/campaigns.py

import logging

from flask import request, current_app

from backerhub import services
from backerhub.api import api_bp, json_payload, failure_message
from backerhub.auth.decorators import api_auth_required
from backerhub.campaigns.formatter import format_campaign, format_campaigns, format_campaign_detail
from backerhub.campaigns.inputs import CampaignInput, CampaignImageInput
from backerhub.errors import ValidationError
from backerhub.helpers import api_response, format_form_errors
from backerhub.storage import save_upload

logger = logging.getLogger(__name__)


@api_bp.route('/campaigns', methods=['GET'])
def get_campaigns():
    user_id = request.args.get('user_id', type=int)
    campaigns = services.campaign_service().get_campaigns(user_id)
    return api_response("List of campaigns", 200, "success", format_campaigns(campaigns))


@api_bp.route('/campaigns/<int:campaign_id>', methods=['GET'])
def get_campaign(campaign_id):
    campaign = services.campaign_service().get_campaign_by_id(campaign_id)
    return api_response("Campaign detail", 200, "success", format_campaign_detail(campaign))


@api_bp.route('/campaigns', methods=['POST'])
@api_auth_required
def create_campaign(current_user):
    form = CampaignInput(json_payload("Failed to create campaign"))
    if not form.validate():
        raise ValidationError("Failed to create campaign", errors=format_form_errors(form), code=422)

    campaign = services.campaign_service().create_campaign(
        user_id=current_user.id,
        name=form.name.data,
        short_description=form.short_description.data,
        description=form.description.data,
        goal_amount=form.goal_amount.data,
        perks=form.perks.data,
    )
    return api_response("Success to create campaign", 200, "success", format_campaign(campaign))


@api_bp.route('/campaigns/<int:campaign_id>', methods=['PUT'])
@api_auth_required
def update_campaign(campaign_id, current_user):
    form = CampaignInput(json_payload("Failed to update campaign"))
    if not form.validate():
        raise ValidationError("Failed to update campaign", errors=format_form_errors(form), code=422)

    with failure_message("Failed to update campaign"):
        campaign = services.campaign_service().update_campaign(
            campaign_id,
            current_user.id,
            name=form.name.data,
            short_description=form.short_description.data,
            description=form.description.data,
            goal_amount=form.goal_amount.data,
            perks=form.perks.data,
        )
    return api_response("Success to update campaign", 200, "success", format_campaign(campaign))


@api_bp.route('/campaign-images', methods=['POST'])
@api_auth_required
def upload_campaign_image(current_user):
    form = CampaignImageInput(request.form)
    if not form.validate():
        raise ValidationError("Failed to upload campaign image", errors=format_form_errors(form), code=422)

    campaign_service = services.campaign_service()
    with failure_message("Failed to upload campaign image"):
        # ownership is checked before anything touches the disk
        campaign_service.get_owned_campaign(form.campaign_id.data, current_user.id)
        path = save_upload(request.files.get('file'), current_app.config['UPLOAD_FOLDER'], current_user.id)
        campaign_service.save_campaign_image(form.campaign_id.data, current_user.id, form.is_primary.data, path)

    return api_response("Campaign image successfully uploaded", 200, "success", {"is_uploaded": True})
