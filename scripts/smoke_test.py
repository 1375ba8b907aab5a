import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from app import create_app
from pprint import pprint

app = create_app()

client = app.test_client()

print('ASSETS:')
for a in app.extensions['asset_store']:
    print(f"  /{a.path} ({a.content_type})")

print('\nHEALTH:')
pprint(client.get('/health').get_json())

failed = 0
checks = [
    ('/', 200),
    ('/index.html', 200),
    ('/styles.css', 200),
    ('/script.js', 200),
    ('/404.html', 200),
    ('/does-not-exist', 404),
    ('/../app.py', 404),
    ('/%2e%2e%2fapp.py', 404),
]
print('\nROUTES:')
for path, expected in checks:
    r = client.get(path)
    leaked = [h for h in ('Server', 'X-Powered-By') if h in r.headers]
    ok = r.status_code == expected and not leaked
    if not ok:
        failed += 1
    print(f"  {'ok  ' if ok else 'FAIL'} {path} -> {r.status_code} {r.content_type}" + (f" leaked {leaked}" if leaked else ''))

if failed:
    print(f'\n{failed} check(s) failed')
    raise SystemExit(1)
print('\nAll checks passed')
