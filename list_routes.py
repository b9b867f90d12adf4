from gloverse_hq.main import app

print("All registered routes:")
for route in app.routes:
    if hasattr(route, 'path') and hasattr(route, 'methods'):
        print(f"{sorted(route.methods)} {route.path}")
