from pg_check_conn.app import run

run()
