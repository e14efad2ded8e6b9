# backerhub/web/transactions.py

from backerhub import services
from backerhub.auth.decorators import admin_login_required
from backerhub.web import web_blueprint, render_page

transactions_bp = web_blueprint('web_transactions', __name__)


@transactions_bp.route('/transactions', methods=['GET'])
@admin_login_required
def index():
    transactions = services.transaction_service().get_all_transactions()
    return render_page('transaction_index.html', transactions=transactions)
