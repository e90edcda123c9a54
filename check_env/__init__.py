import json, sys
import azure.functions as func

from intmatrix import settings


def main(req: func.HttpRequest) -> func.HttpResponse:
    try:
        import numpy as np
        payload = {
            "ok": True,
            "python": sys.version,
            "numpy_version": np.__version__,
            "dtype": settings.MM_DTYPE,
            "strassen_threshold": settings.STRASSEN_THRESHOLD,
            "strassen_workers": settings.STRASSEN_WORKERS,
            "random_range": [settings.RANDOM_LOW, settings.RANDOM_HIGH],
        }
        return func.HttpResponse(json.dumps(payload), mimetype="application/json")
    except Exception as e:
        return func.HttpResponse(
            json.dumps({"ok": False, "error": repr(e)}),
            status_code=500,
            mimetype="application/json",
        )
