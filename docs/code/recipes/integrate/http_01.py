from eventstore_http import Client, Config, new_event

config = Config(url="http://127.0.0.1:2113", username="admin", password="changeit")
with Client(config) as client:
    writer = client.new_stream_writer("invoices-1003")
    writer.append(new_event("", "InvoiceIssued", {"invoice_number": "1003"}))
