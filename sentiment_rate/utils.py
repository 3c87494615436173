import csv, io, datetime as dt
def csv_export(rows):
    buf=io.StringIO(); w=csv.writer(buf)
    w.writerow(["timestamp_iso","rating"])
    for ts, rating in rows:
        iso=dt.datetime.fromtimestamp(ts, dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        w.writerow([iso, int(rating)])
    return buf.getvalue().encode()
