import pathlib, datetime, json
def new_run_dir(suite: str, root: str = "artifacts") -> pathlib.Path:
    ts = datetime.datetime.now().strftime('%Y%m%d_%H%M%S_%f')
    p = pathlib.Path(root) / suite / ts
    p.mkdir(parents=True, exist_ok=True)
    return p
def write_context(outdir: pathlib.Path, context: dict, filename: str = "context.json") -> pathlib.Path:
    path = outdir / filename
    path.write_text(json.dumps(context, indent=2))
    return path
