from flyme_oauth.api.routes import auth, health
