from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from autocorrect import config as CFG
from autocorrect.engine import Engine
from autocorrect.driver import respond

app = Flask(__name__)
_engine: Engine | None = None

log = logging.getLogger(__name__)


def _no_engine():
    return jsonify({"error": "engine not initialized"}), 503

# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    if _engine is None:
        return _no_engine()
    q = request.args.get("q", "", type=str)
    rows = _engine.rank(q)
    return jsonify({
        "query": q,
        "valid": bool(rows) and rows[0].distance == 0,
        "message": respond(rows)[0],
        "suggestions": [r.to_dict() for r in rows],
    })

@app.get("/health")
def health():
    if _engine is None:
        return _no_engine()
    return jsonify({"ok": True, "words": len(_engine), "threshold": _engine.threshold})

# ---------- UI ----------
@app.get("/")
def home():
    # One static page, no external JS/CSS.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Autocorrect • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,Segoe UI,Roboto,Arial; }
.container{ max-width:640px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 12px 0; }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
#msg{ margin-top:12px; color:var(--muted) }
ul{ list-style:none; padding:0; margin:8px 0 0 0 }
li{ display:flex; justify-content:space-between; padding:8px 4px; border-top:1px solid var(--border) }
.dist{ color:var(--muted); font-family:ui-monospace,Menlo,Consolas,monospace }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Autocorrect</h1>
      <form id="f" autocomplete="off">
        <input id="q" type="text" placeholder="Enter a word" autofocus />
      </form>
      <div id="msg">Type a word and press Enter.</div>
      <ul id="out"></ul>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), msg = document.querySelector("#msg"), out = document.querySelector("#out");
document.querySelector("#f").addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  try{
    const resp = await fetch(`/api/suggest?q=${encodeURIComponent(q.value)}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    msg.textContent = data.message;
    out.innerHTML = "";
    if(data.valid) return;
    for(const s of data.suggestions){
      const li = document.createElement("li");
      li.textContent = s.word;
      const d = document.createElement("span");
      d.className = "dist"; d.textContent = s.distance;
      li.appendChild(d);
      out.appendChild(li);
    }
  }catch(e){
    msg.textContent = `Error: ${e.message ?? e}`;
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--dictionary", default=CFG.DEFAULT_DICTIONARY)
    ap.add_argument("--threshold", type=int, default=CFG.DEFAULT_THRESHOLD)
    ap.add_argument("--root", default=CFG.DICTIONARY_DIR)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    global _engine
    # startup errors propagate: no server without a dictionary
    _engine = Engine.from_dictionary(args.dictionary, root=args.root, threshold=args.threshold)
    log.info("Serving %d words on %s:%d", len(_engine), args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
