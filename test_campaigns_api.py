import io

from database import db
from backerhub.models import Campaign, CampaignImage

CAMPAIGN_PAYLOAD = {
    'name': 'Community Garden',
    'short_description': 'Raised beds for the block',
    'description': 'We are building twelve raised beds.',
    'goal_amount': 5000,
    'perks': 'Thank-you card, Tomato basket',
}


def test_list_campaigns_is_public_and_filterable(client, make_user, make_campaign):
    alice = make_user(email='alice@backerhub.io')
    bob = make_user(email='bob@backerhub.io')
    make_campaign(alice, name='Alpha')
    make_campaign(bob, name='Beta')

    everything = client.get('/api/v1/campaigns').get_json()['data']
    only_bob = client.get(f'/api/v1/campaigns?user_id={bob.id}').get_json()['data']

    assert [c['name'] for c in everything] == ['Alpha', 'Beta']
    assert [c['name'] for c in only_bob] == ['Beta']


def test_campaign_detail(client, make_user, make_campaign):
    owner = make_user(name='Owner')
    campaign = make_campaign(owner)

    response = client.get(f'/api/v1/campaigns/{campaign.id}')

    data = response.get_json()['data']
    assert response.status_code == 200
    assert data['perks'] == ['Sticker', 'T-shirt']
    assert data['user']['name'] == 'Owner'
    assert data['images'] == []
    assert data['image_url'] == ''


def test_missing_campaign_is_not_found(client):
    response = client.get('/api/v1/campaigns/404')

    assert response.status_code == 404
    assert response.get_json()['meta'] == {'message': 'Campaign not found', 'code': 404, 'status': 'error'}


def test_create_campaign_is_owned_by_token_user(client, make_user, auth_headers):
    user = make_user()

    response = client.post('/api/v1/campaigns', json=CAMPAIGN_PAYLOAD, headers=auth_headers(user))

    data = response.get_json()['data']
    assert response.status_code == 200
    assert data['user_id'] == user.id
    assert data['slug'] == f'community-garden-{user.id}'
    assert data['current_amount'] == 0


def test_create_campaign_validates_input(client, make_user, auth_headers):
    user = make_user()
    payload = dict(CAMPAIGN_PAYLOAD, goal_amount=0, name='')

    response = client.post('/api/v1/campaigns', json=payload, headers=auth_headers(user))

    assert response.status_code == 422
    assert response.get_json()['meta']['message'] == 'Failed to create campaign'
    assert Campaign.query.count() == 0


def test_owner_can_update_campaign(client, make_user, make_campaign, auth_headers):
    owner = make_user()
    campaign = make_campaign(owner)

    response = client.put(f'/api/v1/campaigns/{campaign.id}', json=CAMPAIGN_PAYLOAD, headers=auth_headers(owner))

    assert response.status_code == 200
    assert db.session.get(Campaign, campaign.id).name == 'Community Garden'


def test_non_owner_cannot_update_campaign(client, make_user, make_campaign, auth_headers):
    owner = make_user(email='owner@backerhub.io')
    intruder = make_user(email='intruder@backerhub.io')
    campaign = make_campaign(owner, name='Untouched')

    response = client.put(f'/api/v1/campaigns/{campaign.id}', json=CAMPAIGN_PAYLOAD, headers=auth_headers(intruder))

    body = response.get_json()
    assert response.status_code == 403
    assert body['meta']['message'] == 'Failed to update campaign'
    assert body['data']['errors'] == ['Not an owner of the campaign']
    db.session.expire_all()
    assert db.session.get(Campaign, campaign.id).name == 'Untouched'


def upload_image(client, headers, campaign_id, filename, is_primary):
    return client.post(
        '/api/v1/campaign-images',
        data={
            'campaign_id': str(campaign_id),
            'is_primary': 'true' if is_primary else 'false',
            'file': (io.BytesIO(b'image-bytes'), filename),
        },
        content_type='multipart/form-data',
        headers=headers,
    )


def test_new_primary_image_demotes_the_previous_one(client, make_user, make_campaign, auth_headers):
    owner = make_user()
    campaign = make_campaign(owner)
    headers = auth_headers(owner)

    assert upload_image(client, headers, campaign.id, 'one.png', True).status_code == 200
    assert upload_image(client, headers, campaign.id, 'two.png', True).status_code == 200
    assert upload_image(client, headers, campaign.id, 'three.png', False).status_code == 200

    db.session.expire_all()
    images = CampaignImage.query.filter_by(campaign_id=campaign.id).order_by(CampaignImage.id).all()
    assert [image.is_primary for image in images] == [False, True, False]
    detail = client.get(f'/api/v1/campaigns/{campaign.id}').get_json()['data']
    assert detail['image_url'].endswith('two.png')


def test_non_owner_cannot_upload_image(app, client, make_user, make_campaign, auth_headers):
    owner = make_user(email='owner@backerhub.io')
    intruder = make_user(email='intruder@backerhub.io')
    campaign = make_campaign(owner)

    response = upload_image(client, auth_headers(intruder), campaign.id, 'x.png', True)

    assert response.status_code == 403
    assert CampaignImage.query.count() == 0
