import shell_charset as app_pkg  # type: ignore
from shell_charset.config.system_settings import Settings  # type: ignore

settings = Settings()
app = app_pkg.create_app(settings)

if __name__ == '__main__':
    print('-'*50)
    print('Shell Charset Service')
    print(f'http://{settings.HOST}:{settings.PORT}{settings.API_PREFIX}/charset/labels')
    print('-'*50)
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG, use_reloader=settings.DEBUG)
