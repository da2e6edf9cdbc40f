import logging
import os
from flask import Flask, render_template, request, flash, redirect, session, url_for
import secrets
from flask_debugtoolbar import DebugToolbarExtension
from flask_httpauth import HTTPBasicAuth
from werkzeug.security import generate_password_hash, check_password_hash
from quick_quack.booking import config
from quick_quack.booking.redirect_policy import ALLOWED_REDIRECT_PREFIXES, DEFAULT_REDIRECT_PATH, validate_redirect_url

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

def create_app():
    app = Flask(__name__)
    app.secret_key = secrets.token_hex(32) #256 bit
    app.config['SECRET_KEY'] = app.secret_key
    # Absolute base for redirects issued by the auth callback
    app.config['DOMAIN'] = config.get_app_url()
    app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'
    app.config['SESSION_COOKIE_SECURE'] = config.is_production()
    app.config['PERMANENT_SESSION_LIFETIME'] = config.SESSION_LIFETIME
    if not config.is_production():
        app.config["DEBUG_TB_INTERCEPT_REDIRECTS"] = False  # Prevents redirect issues
    return app

app = create_app()
# Set to make Flask debug toolbar work
if not config.is_production():
    app.debug=True
auth = HTTPBasicAuth()


def load_users():
    # HASH_ADMIN must be set in production, the dev password is "secret"
    return {"admin": generate_password_hash(os.getenv('HASH_ADMIN') or 'secret')}

users = load_users()

@auth.verify_password
def verify_password(username, password):
    if username in users and check_password_hash(users.get(username), password):
        return username

# Page titles for the dashboard sections. Every allowlisted redirect root gets a page so a vetted redirect always lands somewhere.
DASHBOARD_SECTIONS = {
    "/dashboard": "Dashboard",
    "/event-types": "Event Types",
    "/availability": "Availability",
    "/settings": "Settings",
    "/bookings": "Bookings",
    "/appearance": "Appearance",
    "/links": "Links",
    "/emails": "Emails",
    "/payments": "Payments",
}

def signed_in_user():
    return session.get('username')

# Bounce visitors of dashboard routes to the login page, remembering where they were headed
@app.before_request
def require_login_for_protected_routes():
    if config.is_protected_route(request.path) and not signed_in_user():
        logger.info(f"Unauthenticated request to {request.path!r}, redirecting to login")
        return redirect(url_for('login', redirectTo=request.path))

# Landing page
@app.route("/")
def index():
    return render_template('index.html', title="QuickQuack")

@app.route("/login", methods=['GET'])
def login():
    if signed_in_user():
        return redirect(url_for('dashboard'))
    # Passed through untouched, the callback is responsible for validating it
    redirect_to = request.args.get('redirectTo') or DEFAULT_REDIRECT_PATH
    auth_failed = request.args.get('error') == 'auth_failed'
    return render_template('login.html', sign_in_url=url_for('sign_in', redirectTo=redirect_to), auth_failed=auth_failed)

@app.route("/auth/signin", methods=['GET'])
@auth.login_required
def sign_in():
    session.permanent = True
    session['username'] = auth.current_user()
    logger.info(f"User {auth.current_user()} signed in")
    return redirect(url_for('auth_callback', redirectTo=request.args.get('redirectTo', '')))

@app.route("/auth/callback", methods=['GET'])
def auth_callback():
    candidate = request.args.get('redirectTo')
    redirect_to = validate_redirect_url(candidate)
    # Rejected candidates are worth a look, they may be open-redirect probes
    if candidate and redirect_to != candidate:
        logger.warning(f"Rejected redirect candidate {candidate!r}, using {redirect_to}")
    app_url = app.config['DOMAIN']

    if signed_in_user():
        return redirect(f"{app_url}{redirect_to}")

    logger.warning("Auth callback reached without a signed-in session")
    return redirect(f"{app_url}/login?error=auth_failed")

@app.route("/logout", methods=['POST'])
def logout():
    session.pop('username', None)
    flash("You have been signed out.", "success")
    return redirect(url_for('login'))

# Placeholder for the dashboard CRUD screens
def render_section(section, subpath=None):
    return render_template('dashboard.html', title=DASHBOARD_SECTIONS[section], subpath=subpath, username=signed_in_user())

for section in ALLOWED_REDIRECT_PREFIXES:
    endpoint = section.strip('/').replace('-', '_')
    app.add_url_rule(section, endpoint, render_section, defaults={'section': section})
    # Trailing-slash form of a vetted redirect, e.g. /settings/
    app.add_url_rule(f"{section}/", f"{endpoint}_index", render_section, defaults={'section': section}, strict_slashes=False)
    app.add_url_rule(f"{section}/<path:subpath>", f"{endpoint}_subpath", render_section, defaults={'section': section})

@app.errorhandler(404)
def error_handler(error):
    flash("The page you requested does not exist.", "error")
    return redirect(url_for('index'))

if __name__ == '__main__':
    # production
    if config.is_production():
       app.run(debug=False)
    else:
       toolbar = DebugToolbarExtension(app)
       app.run(debug=True, port=5003)
