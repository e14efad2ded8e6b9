# backerhub/web/campaigns.py

import logging

from flask import redirect, url_for, flash, current_app

from backerhub import services
from backerhub.auth.decorators import admin_login_required
from backerhub.storage import save_upload
from backerhub.web import web_blueprint, render_page
from backerhub.web.forms import CampaignCreateForm, CampaignUpdateForm, CampaignImageForm

logger = logging.getLogger(__name__)

campaigns_bp = web_blueprint('web_campaigns', __name__)


def _owner_choices():
    return [(user.id, user.name) for user in services.user_service().get_all_users()]


@campaigns_bp.route('/campaigns', methods=['GET'])
@admin_login_required
def index():
    campaigns = services.campaign_service().get_campaigns()
    return render_page('campaign_index.html', campaigns=campaigns)


@campaigns_bp.route('/campaigns/new', methods=['GET'])
@admin_login_required
def new():
    form = CampaignCreateForm()
    form.user_id.choices = _owner_choices()
    return render_page('campaign_new.html', form=form)


@campaigns_bp.route('/campaigns', methods=['POST'])
@admin_login_required
def create():
    form = CampaignCreateForm()
    form.user_id.choices = _owner_choices()
    if not form.validate_on_submit():
        return render_page('campaign_new.html', 400, form=form)

    services.campaign_service().create_campaign(
        user_id=form.user_id.data,
        name=form.name.data,
        short_description=form.short_description.data,
        description=form.description.data,
        goal_amount=form.goal_amount.data,
        perks=form.perks.data,
    )
    flash("Campaign created.", "success")
    return redirect(url_for('web_campaigns.index'))


@campaigns_bp.route('/campaigns/image/<int:campaign_id>', methods=['GET'])
@admin_login_required
def new_image(campaign_id):
    campaign = services.campaign_service().get_campaign_by_id(campaign_id)
    return render_page('campaign_image.html', campaign=campaign, form=CampaignImageForm())


@campaigns_bp.route('/campaigns/image/<int:campaign_id>', methods=['POST'])
@admin_login_required
def create_image(campaign_id):
    campaign_service = services.campaign_service()
    campaign = campaign_service.get_campaign_by_id(campaign_id)
    form = CampaignImageForm()
    if not form.validate_on_submit():
        return render_page('campaign_image.html', 400, campaign=campaign, form=form)

    # admins act on behalf of the campaign owner
    path = save_upload(form.file.data, current_app.config['UPLOAD_FOLDER'], campaign.user_id)
    campaign_service.save_campaign_image(campaign.id, campaign.user_id, form.is_primary.data, path)
    flash("Image uploaded.", "success")
    return redirect(url_for('web_campaigns.show', campaign_id=campaign.id))


@campaigns_bp.route('/campaigns/edit/<int:campaign_id>', methods=['GET'])
@admin_login_required
def edit(campaign_id):
    campaign = services.campaign_service().get_campaign_by_id(campaign_id)
    return render_page('campaign_edit.html', campaign=campaign, form=CampaignUpdateForm(obj=campaign))


@campaigns_bp.route('/campaigns/update/<int:campaign_id>', methods=['POST'])
@admin_login_required
def update(campaign_id):
    campaign_service = services.campaign_service()
    campaign = campaign_service.get_campaign_by_id(campaign_id)
    form = CampaignUpdateForm()
    if not form.validate_on_submit():
        return render_page('campaign_edit.html', 400, campaign=campaign, form=form)

    campaign_service.update_campaign(
        campaign.id,
        campaign.user_id,
        name=form.name.data,
        short_description=form.short_description.data,
        description=form.description.data,
        goal_amount=form.goal_amount.data,
        perks=form.perks.data,
    )
    flash("Campaign updated.", "success")
    return redirect(url_for('web_campaigns.index'))


@campaigns_bp.route('/campaigns/show/<int:campaign_id>', methods=['GET'])
@admin_login_required
def show(campaign_id):
    campaign = services.campaign_service().get_campaign_by_id(campaign_id)
    transactions = services.transaction_service().get_transactions_by_campaign_id(campaign.id, campaign.user_id)
    return render_page('campaign_show.html', campaign=campaign, transactions=transactions)
