import azure.functions as func
import json, time

from intmatrix import Matrix, MatrixError, multiply, multiply_naive, strassen
from intmatrix.settings import get_logger

ALGORITHMS = {
    "auto": multiply,
    "naive": lambda A, B, threshold=None: multiply_naive(A, B),
    "strassen": strassen,
}


def _json(payload: dict, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(payload), status_code=status_code,
                             mimetype="application/json")


def _read_matrix(body: dict, key: str) -> Matrix:
    rows = body.get(key)
    if not isinstance(rows, list) or not rows:
        raise ValueError(f"'{key}' must be a non-empty list of rows")
    return Matrix.from_list(rows)


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("matmul_http")
    try:
        body = req.get_json()
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")
        A = _read_matrix(body, "matrix_a")
        B = _read_matrix(body, "matrix_b")
        algorithm = body.get("algorithm", "auto")
        if algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {sorted(ALGORITHMS)}")
        threshold = body.get("threshold")
        if threshold is not None:
            threshold = int(threshold)

        logger.info(f"A={A.rows}x{A.cols}, B={B.rows}x{B.cols}, algorithm={algorithm}, threshold={threshold}")
        t0 = time.time()
        C = ALGORITHMS[algorithm](A, B, threshold=threshold)
        t1 = time.time()

        return _json({
            "result": C.tolist(),
            "shape": [C.rows, C.cols],
            "algorithm": algorithm,
            "compute_sec": round(t1 - t0, 6),
        })
    except (MatrixError, TypeError, ValueError) as e:
        logger.warning(f"rejected: {type(e).__name__}: {e}")
        return _json({"error": type(e).__name__, "message": str(e)}, status_code=400)
    except Exception as e:
        logger.exception("multiplication failed")
        return _json({"error": type(e).__name__, "message": str(e)}, status_code=500)
