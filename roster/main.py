from typing import Optional

from fastapi import FastAPI, UploadFile, File, HTTPException, Query

from .decoder import decode, decode_bytes
from .models import DecodeResponse, HealthResponse, RecordsResponse, SearchRequest, SearchResponse
from .records import load_records
from .search import filter_records

app = FastAPI(
    title="roster-core",
    description="Lenient CSV decoding and Arabic-aware search for student roster exports",
    version="0.1.0",
)


async def _read_csv(file: UploadFile) -> str:
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")
    return decode_bytes(await file.read())


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/decode", response_model=DecodeResponse)
async def decode_csv(file: UploadFile = File(...)):
    rows = decode(await _read_csv(file))
    widths = {len(r) for r in rows}
    return {
        "rows": rows,
        "summary": {
            "rows": len(rows),
            "max_columns": max(widths, default=0),
            "ragged": len(widths) > 1,
        },
    }


@app.post("/records", response_model=RecordsResponse)
async def records_csv(file: UploadFile = File(...), header: Optional[bool] = Query(default=None)):
    records, report = load_records(await _read_csv(file), header=header)
    return {"records": records, "summary": report}


@app.post("/search", response_model=SearchResponse)
def search(req: SearchRequest):
    hits = filter_records(req.records, req.query, level=req.level)
    return {"records": hits, "total": len(req.records), "matched": len(hits)}
