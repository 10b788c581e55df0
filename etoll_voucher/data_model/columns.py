# etoll_voucher/data_model/columns.py
"""Header names read from the settlement report (exact, case-sensitive)."""

COL_SETTLEMENT_DATE = "Settlement Date"
COL_TRANSACTION_CYCLE = "Transaction Cycle"
COL_TRANSACTION_TYPE = "Transaction Type"
COL_CHANNEL = "Channel"
COL_SETAMTDR = "SETAMTDR"
COL_SETAMTCR = "SETAMTCR"
COL_SERVICE_FEE_DR = "Service Fee Amt Dr"
COL_SERVICE_FEE_CR = "Service Fee Amt Cr"
COL_FINAL_NET_AMT = "Final Net Amt"
COL_INWARD_OUTWARD = "Inward/Outward"

# Grouping columns printed once per block and implied for the rows below.
FORWARD_FILL_COLUMNS = (COL_TRANSACTION_CYCLE, COL_TRANSACTION_TYPE)

# Header rows of the two output sheets.
VOUCHER_HEADERS = ["Account No", "Debit", "Credit", "Narration", "Description"]
UPLOAD_HEADERS = ["Account No", "C/D", "Amount", "Narration"]
