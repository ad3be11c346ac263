def handler():
    return "<h1>Archive</h1><p>Nothing older yet.</p>"
