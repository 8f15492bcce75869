def siliconweb(request):
    return {"_siliconWeb": "1"}
