from panel import create_app
from panel.services import APP_FUNCTIONS, DurationSpec, ViewParams, view

app = create_app()


@app.shell_context_processor
def make_shell_context():
    return {
        "APP_FUNCTIONS": APP_FUNCTIONS,
        "DurationSpec": DurationSpec,
        "ViewParams": ViewParams,
        "view": view,
    }


if __name__ == '__main__':
    app.run(debug=True)
